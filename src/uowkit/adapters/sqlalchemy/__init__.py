"""SQLAlchemy adapter – async engine transaction source and handle.

Requires the ``sqlalchemy`` extra: ``pip install 'uowkit[sqlalchemy]'``.
"""
from uowkit.adapters.sqlalchemy.source import SqlAlchemyTransactionSource
from uowkit.adapters.sqlalchemy.transaction import SqlAlchemyTransaction

__all__ = ["SqlAlchemyTransaction", "SqlAlchemyTransactionSource"]
