"""
Admin table declarations.

Static description of the back-office grids and forms for users, stores
and brands: which columns the grid shows (label, width, sorting,
filtering, display formatter) and which inputs the edit form has
(type, placeholder, help text, options, defaults). An external admin
renderer consumes them through GET /admin/tables/{name}.

Display formatters are plain functions keyed by name so the declaration
stays serializable.

Usage:
    from rest_api.services.admin_tables import get_admin_table, render_row

    table = get_admin_table("brands")
    cells = render_row(table, {"status": "active", "logo": ""})
    # {"status": '<span class="label label-success">Active</span>', ...}
"""

from __future__ import annotations

import html
from dataclasses import asdict, dataclass
from typing import Any, Callable

from shared.config.constants import EntityStatus, Limits


# =============================================================================
# Display formatters
# =============================================================================


def status_label(value: Any) -> str:
    """Colored label: green for active, red for anything else."""
    if value == EntityStatus.ACTIVE:
        return '<span class="label label-success">Active</span>'
    return '<span class="label label-danger">Inactive</span>'


def truncate(value: Any, length: int = Limits.DESCRIPTION_PREVIEW_LENGTH) -> str:
    """Cut long text to `length` characters followed by "..."."""
    text = "" if value is None else str(value)
    if len(text) > length:
        return text[:length] + "..."
    return text


def logo_thumbnail(value: Any) -> str:
    """Small image tag for a logo URL, or a muted placeholder."""
    if not value:
        return '<span class="text-muted">No Logo</span>'
    src = html.escape(str(value), quote=True)
    return (
        f'<img src="{src}" '
        'style="max-width: 60px; max-height: 60px; border-radius: 4px;" />'
    )


FORMATTERS: dict[str, Callable[[Any], str]] = {
    "status_label": status_label,
    "truncate": truncate,
    "logo_thumbnail": logo_thumbnail,
}


# =============================================================================
# Declarations
# =============================================================================


@dataclass(frozen=True)
class InfoField:
    """One grid column."""
    label: str
    column: str
    db_type: str
    sortable: bool = False
    filter: str | None = None  # "like" or "datetime_range"
    width: int | None = None
    display: str | None = None  # key into FORMATTERS


@dataclass(frozen=True)
class FormField:
    """One edit form input."""
    label: str
    column: str
    db_type: str
    form_type: str
    required: bool = False
    placeholder: str | None = None
    help: str | None = None
    options: tuple[tuple[str, str], ...] = ()
    default: str | None = None
    allow_add: bool = True
    allow_edit: bool = True
    now_on_insert: bool = False
    now_on_update: bool = False


@dataclass(frozen=True)
class AdminTable:
    name: str
    title: str
    description: str
    form_title: str
    form_description: str
    info_fields: tuple[InfoField, ...]
    form_fields: tuple[FormField, ...]
    default_page_size: int = Limits.DEFAULT_PAGE_SIZE
    filter_layout: str = "two_col"

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        for form_field in data["form_fields"]:
            form_field["options"] = [
                {"text": text, "value": value} for text, value in form_field["options"]
            ]
        return data


# Columns every entity shares

STATUS_OPTIONS = (("Active", EntityStatus.ACTIVE), ("Inactive", EntityStatus.INACTIVE))


def _id_info() -> InfoField:
    return InfoField("ID", "id", "int", sortable=True, width=80)


def _status_info() -> InfoField:
    return InfoField("Status", "status", "varchar", filter="like", width=100, display="status_label")


def _timestamp_info() -> tuple[InfoField, ...]:
    return (
        InfoField("Created At", "created_at", "datetime", sortable=True, filter="datetime_range", width=150),
        InfoField("Updated At", "updated_at", "datetime", sortable=True, width=150),
    )


def _id_form() -> FormField:
    return FormField("ID", "id", "int", "default", allow_add=False, allow_edit=False)


def _status_form() -> FormField:
    return FormField(
        "Status", "status", "varchar", "select",
        required=True, options=STATUS_OPTIONS, default=EntityStatus.DEFAULT,
    )


def _timestamp_forms() -> tuple[FormField, ...]:
    return (
        FormField("Created At", "created_at", "datetime", "datetime",
                  allow_add=False, allow_edit=False, now_on_insert=True),
        FormField("Updated At", "updated_at", "datetime", "datetime",
                  allow_add=False, allow_edit=False, now_on_update=True),
    )


USERS_TABLE = AdminTable(
    name="users",
    title="Users Management",
    description="Create, Read, Update, and Delete Users",
    form_title="User Form",
    form_description="Add or Edit User Information",
    info_fields=(
        _id_info(),
        InfoField("Name", "name", "varchar", sortable=True, filter="like", width=150),
        InfoField("Email", "email", "varchar", sortable=True, filter="like", width=200),
        InfoField("Phone", "phone", "varchar", filter="like", width=120),
        _status_info(),
        *_timestamp_info(),
    ),
    form_fields=(
        _id_form(),
        FormField("Name", "name", "varchar", "text", required=True,
                  placeholder="Enter user name", help="Full name of the user"),
        FormField("Email", "email", "varchar", "email", required=True,
                  placeholder="user@example.com", help="Valid email address"),
        FormField("Phone", "phone", "varchar", "text",
                  placeholder="+1234567890", help="Contact phone number"),
        _status_form(),
        *_timestamp_forms(),
    ),
)

STORES_TABLE = AdminTable(
    name="stores",
    title="Stores Management",
    description="Create, Read, Update, and Delete Stores",
    form_title="Store Form",
    form_description="Add or Edit Store Information",
    info_fields=(
        _id_info(),
        InfoField("Name", "name", "varchar", sortable=True, filter="like", width=150),
        InfoField("Address", "address", "text", filter="like", width=200),
        InfoField("Phone", "phone", "varchar", filter="like", width=120),
        InfoField("Email", "email", "varchar", filter="like", width=180),
        _status_info(),
        *_timestamp_info(),
    ),
    form_fields=(
        _id_form(),
        FormField("Name", "name", "varchar", "text", required=True,
                  placeholder="Enter store name", help="Name of the store"),
        FormField("Address", "address", "text", "textarea",
                  placeholder="Enter store address", help="Physical address of the store"),
        FormField("Phone", "phone", "varchar", "text",
                  placeholder="+1234567890", help="Store contact phone number"),
        FormField("Email", "email", "varchar", "email",
                  placeholder="store@example.com", help="Store email address"),
        _status_form(),
        *_timestamp_forms(),
    ),
)

BRANDS_TABLE = AdminTable(
    name="brands",
    title="Brands Management",
    description="Create, Read, Update, and Delete Brands",
    form_title="Brand Form",
    form_description="Add or Edit Brand Information",
    info_fields=(
        _id_info(),
        InfoField("Logo", "logo", "varchar", width=100, display="logo_thumbnail"),
        InfoField("Name", "name", "varchar", sortable=True, filter="like", width=180),
        InfoField("Description", "description", "text", width=250, display="truncate"),
        _status_info(),
        *_timestamp_info(),
    ),
    form_fields=(
        _id_form(),
        FormField("Name", "name", "varchar", "text", required=True,
                  placeholder="Enter brand name", help="Name of the brand"),
        FormField("Description", "description", "text", "textarea",
                  placeholder="Enter brand description", help="Detailed description of the brand"),
        FormField("Logo", "logo", "varchar", "url",
                  placeholder="https://example.com/logo.png", help="URL of the brand logo image"),
        _status_form(),
        *_timestamp_forms(),
    ),
)

ADMIN_TABLES: dict[str, AdminTable] = {
    table.name: table for table in (USERS_TABLE, STORES_TABLE, BRANDS_TABLE)
}


def list_admin_tables() -> list[str]:
    return list(ADMIN_TABLES)


def get_admin_table(name: str) -> AdminTable | None:
    return ADMIN_TABLES.get(name)


def render_row(table: AdminTable, row: dict[str, Any]) -> dict[str, Any]:
    """
    Apply the grid's display formatters to one row.

    Only the declared info columns are returned; columns without a
    formatter pass through unchanged.
    """
    cells: dict[str, Any] = {}
    for info in table.info_fields:
        value = row.get(info.column)
        if info.display:
            value = FORMATTERS[info.display](value)
        cells[info.column] = value
    return cells
