# Database utilities package
from .sql import (
    not_blank,
    unknown_if_blank,
    run_select,
)
