"""
FastAPI routers for the catalog bounded context.

All routes delegate to services. No business logic here.
Input validation is handled by Pydantic schemas.
Error mapping is handled by centralized error handlers.
"""

from typing import Callable, TypeVar

from fastapi import APIRouter, Depends, Request, Response, status

from catalog.application.catalog.category_service import CategoryService
from catalog.application.catalog.dtos import (
    CategoryDTO,
    ProductDTO,
    RoleDTO,
    UserDTO,
    UserInsertDTO,
)
from catalog.application.catalog.product_service import ProductService
from catalog.application.catalog.role_service import RoleService
from catalog.application.catalog.user_service import UserService
from catalog.domain.catalog.entities import Page, PageRequest
from catalog.interfaces.catalog.dependencies import (
    get_category_service,
    get_page_request,
    get_product_service,
    get_role_service,
    get_user_service,
)
from catalog.interfaces.catalog.schemas import (
    CategoryRequest,
    CategoryResponse,
    ErrorResponse,
    IdReference,
    PageResponse,
    ProductRequest,
    ProductResponse,
    RoleResponse,
    UserInsertRequest,
    UserResponse,
    UserUpdateRequest,
)

T = TypeVar("T")
R = TypeVar("R")

NOT_FOUND = {404: {"model": ErrorResponse}}
CONFLICT = {409: {"model": ErrorResponse}}
BAD_SORT = {400: {"model": ErrorResponse}}

category_router = APIRouter(prefix="/categories", tags=["categories"])
product_router = APIRouter(prefix="/products", tags=["products"])
user_router = APIRouter(prefix="/users", tags=["users"])
role_router = APIRouter(prefix="/roles", tags=["roles"])


def _page_response(page: Page[T], converter: Callable[[T], R]) -> PageResponse:
    return PageResponse(
        content=[converter(item) for item in page.content],
        page=page.page,
        size=page.size,
        total_elements=page.total_elements,
        total_pages=page.total_pages,
        number_of_elements=page.number_of_elements,
        first=page.first,
        last=page.last,
        empty=page.empty,
    )


def _set_location(request: Request, response: Response, route_name: str, **path_params) -> None:
    response.headers["Location"] = str(request.url_for(route_name, **path_params))


# ── Categories ──────────────────────────────────────────────────────


def _category_response(dto: CategoryDTO) -> CategoryResponse:
    return CategoryResponse(id=dto.id, name=dto.name)


@category_router.get(
    "",
    response_model=list[CategoryResponse],
    summary="List categories",
    description="Return every category, ordered by id.",
)
def find_all_categories(
    service: CategoryService = Depends(get_category_service),
) -> list[CategoryResponse]:
    """Return every category."""
    return [_category_response(dto) for dto in service.find_all()]


@category_router.get(
    "/paged",
    response_model=PageResponse[CategoryResponse],
    responses=BAD_SORT,
    summary="List categories page by page",
)
def find_categories_paged(
    page_request: PageRequest = Depends(get_page_request),
    service: CategoryService = Depends(get_category_service),
) -> PageResponse[CategoryResponse]:
    """Return one page of categories."""
    return _page_response(service.find_all_paged(page_request), _category_response)


@category_router.get(
    "/{category_id}",
    response_model=CategoryResponse,
    responses=NOT_FOUND,
    summary="Get a category",
)
def get_category(
    category_id: int,
    service: CategoryService = Depends(get_category_service),
) -> CategoryResponse:
    """Return a single category by id."""
    return _category_response(service.find_by_id(category_id))


@category_router.post(
    "",
    response_model=CategoryResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a category",
)
def insert_category(
    body: CategoryRequest,
    request: Request,
    response: Response,
    service: CategoryService = Depends(get_category_service),
) -> CategoryResponse:
    """Create a category and point the Location header at it."""
    dto = service.insert(CategoryDTO(name=body.name))
    _set_location(request, response, "get_category", category_id=dto.id)
    return _category_response(dto)


@category_router.put(
    "/{category_id}",
    response_model=CategoryResponse,
    responses=NOT_FOUND,
    summary="Update a category",
)
def update_category(
    category_id: int,
    body: CategoryRequest,
    service: CategoryService = Depends(get_category_service),
) -> CategoryResponse:
    """Replace the fields of an existing category."""
    return _category_response(service.update(category_id, CategoryDTO(name=body.name)))


@category_router.delete(
    "/{category_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={**NOT_FOUND, **CONFLICT},
    summary="Delete a category",
    description="Fails with 409 while products still reference the category.",
)
def delete_category(
    category_id: int,
    service: CategoryService = Depends(get_category_service),
) -> Response:
    """Delete a category by id."""
    service.delete(category_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ── Products ────────────────────────────────────────────────────────


def _product_response(dto: ProductDTO) -> ProductResponse:
    return ProductResponse(
        id=dto.id,
        name=dto.name,
        description=dto.description,
        price=dto.price,
        img_url=dto.img_url,
        date=dto.date,
        categories=[_category_response(c) for c in dto.categories],
    )


def _product_dto(body: ProductRequest) -> ProductDTO:
    return ProductDTO(
        name=body.name,
        description=body.description,
        price=body.price,
        img_url=body.img_url,
        date=body.date,
        categories=[CategoryDTO(id=ref.id, name="") for ref in body.categories],
    )


@product_router.get(
    "",
    response_model=PageResponse[ProductResponse],
    responses=BAD_SORT,
    summary="List products page by page",
)
def find_products_paged(
    page_request: PageRequest = Depends(get_page_request),
    service: ProductService = Depends(get_product_service),
) -> PageResponse[ProductResponse]:
    """Return one page of products."""
    return _page_response(service.find_all_paged(page_request), _product_response)


@product_router.get(
    "/{product_id}",
    response_model=ProductResponse,
    responses=NOT_FOUND,
    summary="Get a product",
)
def get_product(
    product_id: int,
    service: ProductService = Depends(get_product_service),
) -> ProductResponse:
    """Return a single product with its categories."""
    return _product_response(service.find_by_id(product_id))


@product_router.post(
    "",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
    responses=NOT_FOUND,
    summary="Create a product",
)
def insert_product(
    body: ProductRequest,
    request: Request,
    response: Response,
    service: ProductService = Depends(get_product_service),
) -> ProductResponse:
    """Create a product linked to existing categories."""
    dto = service.insert(_product_dto(body))
    _set_location(request, response, "get_product", product_id=dto.id)
    return _product_response(dto)


@product_router.put(
    "/{product_id}",
    response_model=ProductResponse,
    responses=NOT_FOUND,
    summary="Update a product",
)
def update_product(
    product_id: int,
    body: ProductRequest,
    service: ProductService = Depends(get_product_service),
) -> ProductResponse:
    """Replace the fields and categories of an existing product."""
    return _product_response(service.update(product_id, _product_dto(body)))


@product_router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={**NOT_FOUND, **CONFLICT},
    summary="Delete a product",
)
def delete_product(
    product_id: int,
    service: ProductService = Depends(get_product_service),
) -> Response:
    """Delete a product by id."""
    service.delete(product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ── Roles ───────────────────────────────────────────────────────────


def _role_response(dto: RoleDTO) -> RoleResponse:
    return RoleResponse(id=dto.id, authority=dto.authority)


def _role_refs(refs: list[IdReference]) -> list[RoleDTO]:
    return [RoleDTO(id=ref.id, authority="") for ref in refs]


@role_router.get("", response_model=list[RoleResponse], summary="List roles")
def find_all_roles(
    service: RoleService = Depends(get_role_service),
) -> list[RoleResponse]:
    return [_role_response(dto) for dto in service.find_all()]


@role_router.get(
    "/{role_id}", response_model=RoleResponse, responses=NOT_FOUND, summary="Get a role"
)
def get_role(
    role_id: int,
    service: RoleService = Depends(get_role_service),
) -> RoleResponse:
    return _role_response(service.find_by_id(role_id))


# ── Users ───────────────────────────────────────────────────────────


def _user_response(dto: UserDTO) -> UserResponse:
    return UserResponse(
        id=dto.id,
        first_name=dto.first_name,
        last_name=dto.last_name,
        email=dto.email,
        roles=[_role_response(r) for r in dto.roles],
    )


@user_router.get(
    "",
    response_model=PageResponse[UserResponse],
    responses=BAD_SORT,
    summary="List users page by page",
)
def find_users_paged(
    page_request: PageRequest = Depends(get_page_request),
    service: UserService = Depends(get_user_service),
) -> PageResponse[UserResponse]:
    """Return one page of users. Passwords are never returned."""
    return _page_response(service.find_all_paged(page_request), _user_response)


@user_router.get(
    "/{user_id}", response_model=UserResponse, responses=NOT_FOUND, summary="Get a user"
)
def get_user(
    user_id: int,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    """Return a single user with its roles."""
    return _user_response(service.find_by_id(user_id))


@user_router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    responses={**NOT_FOUND, **CONFLICT},
    summary="Create a user",
    description="Fails with 409 when the email is already registered.",
)
def insert_user(
    body: UserInsertRequest,
    request: Request,
    response: Response,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    """Create a user; the password is stored hashed."""
    dto = service.insert(
        UserInsertDTO(
            first_name=body.first_name,
            last_name=body.last_name,
            email=body.email,
            password=body.password,
            roles=_role_refs(body.roles),
        )
    )
    _set_location(request, response, "get_user", user_id=dto.id)
    return _user_response(dto)


@user_router.put(
    "/{user_id}",
    response_model=UserResponse,
    responses={**NOT_FOUND, **CONFLICT},
    summary="Update a user",
)
def update_user(
    user_id: int,
    body: UserUpdateRequest,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    """Replace the profile fields and roles of an existing user."""
    dto = service.update(
        user_id,
        UserDTO(
            first_name=body.first_name,
            last_name=body.last_name,
            email=body.email,
            roles=_role_refs(body.roles),
        ),
    )
    return _user_response(dto)


@user_router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=NOT_FOUND,
    summary="Delete a user",
)
def delete_user(
    user_id: int,
    service: UserService = Depends(get_user_service),
) -> Response:
    """Delete a user and its role links."""
    service.delete(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


router = APIRouter()
router.include_router(category_router)
router.include_router(product_router)
router.include_router(role_router)
router.include_router(user_router)
