"""MySQL-backed DAL components."""

from .driver import MysqlDriver
from .param_translation import translate_qmark_params_to_mysql

__all__ = [
    "MysqlDriver",
    "translate_qmark_params_to_mysql",
]
