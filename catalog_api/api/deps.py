# catalog_api/api/deps.py
from fastapi import Request
from catalog_api.clients.account_directory import AccountDirectoryClient
from catalog_api.core.config import Settings
from catalog_api.domain.repositories.assignment_repo import AssignmentRepo
from catalog_api.domain.repositories.product_repo import ProductRepo

# The stores and the directory client live on app.state; they are built once per
# process by create_app / lifespan and handed to routes through these dependencies.

def settings_dep(request: Request) -> Settings:
    return request.app.state.settings

def product_repo(request: Request) -> ProductRepo:
    return request.app.state.products

def assignment_repo(request: Request) -> AssignmentRepo:
    return request.app.state.assignments

def account_directory(request: Request) -> AccountDirectoryClient:
    return request.app.state.directory
