"""
커스텀 예외 정의

애플리케이션 전역에서 사용되는 커스텀 예외 클래스들입니다.
라우터에서 각 예외를 HTTP 상태 코드로 변환합니다.
"""


class UserAlreadyExistsException(Exception):
    """
    이미 등록된 이메일로 사용자를 생성/수정하려 할 때 발생하는 예외

    HTTP Status Code: 400 Bad Request
    """

    def __init__(self, email: str, message: str | None = None):
        self.email = email
        self.message = message or "User with this email already exists"
        super().__init__(self.message)


class InvalidCredentialsException(Exception):
    """
    인증 실패 시 발생하는 예외 (잘못된 비밀번호, 유효하지 않은 토큰 등)

    HTTP Status Code: 401 Unauthorized
    """

    def __init__(self, message: str = "Invalid credentials"):
        self.message = message
        super().__init__(self.message)


class UserNotFoundException(Exception):
    """
    사용자를 찾을 수 없을 때 발생하는 예외

    HTTP Status Code: 404 Not Found (토큰 검증 중에는 401)
    """

    def __init__(self, identifier: int | str):
        self.identifier = identifier
        self.message = f"User '{identifier}' not found"
        super().__init__(self.message)


class SelfDeletionException(Exception):
    """
    현재 로그인한 사용자가 자기 계정을 삭제하려 할 때 발생하는 예외

    HTTP Status Code: 400 Bad Request
    """

    def __init__(self, user_id: int):
        self.user_id = user_id
        self.message = "Cannot delete your own account"
        super().__init__(self.message)


class ProductNotFoundException(Exception):
    """
    상품을 찾을 수 없을 때 발생하는 예외

    HTTP Status Code: 404 Not Found
    """

    def __init__(self, product_id: str):
        self.product_id = product_id
        self.message = f"Product with id {product_id} not found"
        super().__init__(self.message)


class CategoryNotFoundException(Exception):
    """
    카테고리를 찾을 수 없을 때 발생하는 예외

    HTTP Status Code: 404 Not Found
    """

    def __init__(self, category_id: int):
        self.category_id = category_id
        self.message = f"Category with id {category_id} not found"
        super().__init__(self.message)


class CategoryAlreadyExistsException(Exception):
    """
    중복된 slug로 카테고리를 생성/수정하려 할 때 발생하는 예외

    HTTP Status Code: 409 Conflict
    """

    def __init__(self, slug: str):
        self.slug = slug
        self.message = f"Category with slug '{slug}' already exists"
        super().__init__(self.message)


class ExpenseTitleNotFoundException(Exception):
    """
    지출 항목(title)을 찾을 수 없을 때 발생하는 예외

    HTTP Status Code: 404 Not Found
    """

    def __init__(self, title_id: int):
        self.title_id = title_id
        self.message = f"Expense title with id {title_id} not found"
        super().__init__(self.message)


class ExpenseNotFoundException(Exception):
    """
    지출 내역이 없거나 요청한 사용자가 등록한 내역이 아닐 때 발생하는 예외

    HTTP Status Code: 404 Not Found
    """

    def __init__(self, expense_id: int):
        self.expense_id = expense_id
        self.message = f"Expense with id {expense_id} not found"
        super().__init__(self.message)


class EmployeeNotFoundException(Exception):
    """
    직원을 찾을 수 없을 때 발생하는 예외

    HTTP Status Code: 404 Not Found
    """

    def __init__(self, employee_id: int):
        self.employee_id = employee_id
        self.message = f"Employee with id {employee_id} not found"
        super().__init__(self.message)


class ShopifyNotConfiguredException(Exception):
    """
    Shopify 자격 증명이 없거나 예시 값 그대로일 때 발생하는 예외

    HTTP Status Code: 503 Service Unavailable
    """

    def __init__(
        self,
        message: str = (
            "Shopify credentials not configured. Please update "
            "SHOPIFY_STORE_DOMAIN and SHOPIFY_ACCESS_TOKEN in your .env file."
        ),
    ):
        self.message = message
        super().__init__(self.message)


class ShopifyAPIException(Exception):
    """
    Shopify Admin API 호출이 실패했을 때 발생하는 예외

    HTTP Status Code: 502 Bad Gateway
    """

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(self.message)


class SyncInProgressException(Exception):
    """
    다른 상품 동기화 작업이 락을 점유 중일 때 발생하는 예외

    HTTP Status Code: 409 Conflict
    """

    def __init__(self, resource: str = "product-sync"):
        self.resource = resource
        self.message = f"Another sync is already in progress for resource: {resource}"
        super().__init__(self.message)
