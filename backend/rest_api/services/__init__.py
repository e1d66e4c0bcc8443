"""
Services module for business logic.

- base_service.py: BaseCRUDService (transactions, error mapping, hooks)
- domain/: UserService, StoreService, BrandService
- admin_tables.py: Admin grid/form declarations and display formatters

Usage:
    from rest_api.services.domain import StoreService
    service = StoreService(db)
    stores = service.list_all()
"""
