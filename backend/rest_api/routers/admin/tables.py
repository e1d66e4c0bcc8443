"""
Admin table metadata endpoints.

Serves the grid/form declarations from rest_api.services.admin_tables to
the external back-office renderer.
"""

from typing import Any

from fastapi import APIRouter

from rest_api.services.admin_tables import get_admin_table, list_admin_tables
from shared.utils.exceptions import NotFoundError
from shared.utils.schemas import DataResponse


router = APIRouter(prefix="/admin/tables", tags=["admin-tables"])


@router.get("", response_model=DataResponse[list[str]])
def list_tables() -> DataResponse[list[str]]:
    return DataResponse(data=list_admin_tables())


@router.get("/{table_name}", response_model=DataResponse[dict[str, Any]])
def get_table(table_name: str) -> DataResponse[dict[str, Any]]:
    """Grid columns, form inputs and page settings for one table."""
    table = get_admin_table(table_name)
    if table is None:
        raise NotFoundError("Admin table", table_name)
    return DataResponse(data=table.to_dict())
