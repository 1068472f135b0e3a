"""Configuration objects for the SQL event parser."""

from dataclasses import dataclass

from sqlevents.exceptions import ImproperConfigurationError

__all__ = ("ParserConfig",)


@dataclass(slots=True)
class ParserConfig:
    """Controls what the parser writes to its debug log.

    Detection results never depend on these settings.
    """

    log_statements: bool = False
    sql_truncation_length: int = 200
    include_sql_hash: bool = True

    def __post_init__(self) -> None:
        if self.sql_truncation_length < 0:
            msg = f"sql_truncation_length must be non-negative, got {self.sql_truncation_length}"
            raise ImproperConfigurationError(msg)

    def copy(self) -> "ParserConfig":
        """Return a copy to avoid sharing mutable state."""

        return ParserConfig(
            log_statements=self.log_statements,
            sql_truncation_length=self.sql_truncation_length,
            include_sql_hash=self.include_sql_hash,
        )
