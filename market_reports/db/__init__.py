"""Database layer package for all SQL execution boundaries."""

from .executor import SQLAlchemyQueryExecutor
from .health import SQLAlchemyConnectionProbeService
from .interfaces import ConnectionProbePort, QueryExecutorPort, RowMapping
from .session import db_create_engine

__all__ = [
	"ConnectionProbePort",
	"QueryExecutorPort",
	"RowMapping",
	"SQLAlchemyQueryExecutor",
	"SQLAlchemyConnectionProbeService",
	"db_create_engine",
]
