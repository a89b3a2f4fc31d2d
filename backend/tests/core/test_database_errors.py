"""Database Error Mapping — SQLAlchemy failures surface as DatabaseError.

Tests:
    - Each SQLAlchemy failure family maps to its own operation label
    - Session context rolls back and re-raises as a 503 DatabaseError
"""

import pytest
from sqlalchemy.exc import (
    DBAPIError, IntegrityError, OperationalError, SQLAlchemyError,
)

from calculator.core.errors import DatabaseError
from calculator.infrastructure.database import (
    DatabaseSessionManager, to_database_error,
)


@pytest.mark.parametrize("exc,operation", [
    (IntegrityError("INSERT", {}, Exception("fk")), "write"),
    (OperationalError("SELECT 1", {}, Exception("down")), "connection"),
    (DBAPIError("SELECT", {}, Exception("bad")), "query"),
    (SQLAlchemyError("aborted"), "transaction"),
])
def test_maps_failure_family_to_operation(exc, operation):
    error = to_database_error(exc)
    assert isinstance(error, DatabaseError)
    assert error.operation == operation
    assert error.http_status == 503


def test_integrity_error_names_projects_and_calculations():
    error = to_database_error(IntegrityError("INSERT", {}, Exception("fk")))
    assert error.to_response() == {
        "errorMessage": "Database write failed: "
                        "project or calculation rejected by a store constraint",
    }


async def test_session_reraises_as_database_error():
    manager = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    try:
        with pytest.raises(DatabaseError) as exc:
            async with manager.session():
                raise OperationalError("SELECT 1", {}, Exception("down"))
        assert exc.value.operation == "connection"
    finally:
        await manager.dispose()
