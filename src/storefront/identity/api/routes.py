"""FastAPI endpoints for authentication, the customer account and admin user management."""

from fastapi import APIRouter, Depends, HTTPException, Response
from protean.utils.globals import current_domain

from storefront.cart.management import MergeGuestCart
from storefront.identity.api.schemas import (
    AddressRequest,
    AddressResponse,
    ChangePasswordRequest,
    EmailRequest,
    IdResponse,
    LoginRequest,
    LoginResponse,
    MessageResponse,
    RegisterRequest,
    RegisterResponse,
    ResetPasswordRequest,
    SetAdminRoleRequest,
    StatusResponse,
    TokenRequest,
    UpdateAddressRequest,
    UpdateProfileRequest,
    UserResponse,
)
from storefront.identity.auth.tokens import issue_session_token
from storefront.identity.session import SESSION_COOKIE, guest_session_id, require_admin, require_user
from storefront.identity.user.addresses import AddAddress, RemoveAddress, SetDefaultAddress, UpdateAddress
from storefront.identity.user.authentication import AuthenticateUser, InvalidCredentialsError
from storefront.identity.user.profile import DeleteUser, SetAdminRole, UpdateProfile
from storefront.identity.user.recovery import ChangePassword, RequestPasswordReset, ResetPassword
from storefront.identity.user.registration import RegisterUser
from storefront.identity.user.user import User
from storefront.identity.user.verification import ResendVerification, VerifyEmail
from storefront.utils.config import get_session_ttl_days, is_production

auth_router = APIRouter(prefix="/auth", tags=["auth"])
account_router = APIRouter(prefix="/account", tags=["account"])
admin_user_router = APIRouter(prefix="/admin/users", tags=["admin"])


# --- Auth ---


@auth_router.post("/register", status_code=201, response_model=RegisterResponse)
async def register(body: RegisterRequest) -> RegisterResponse:
    command = RegisterUser(email=body.email, password=body.password, name=body.name, phone=body.phone)
    return RegisterResponse(id=current_domain.process(command, asynchronous=False))


@auth_router.post("/login", response_model=LoginResponse)
async def login(
    body: LoginRequest,
    response: Response,
    session_id: str | None = Depends(guest_session_id),
) -> LoginResponse:
    try:
        user_id = current_domain.process(
            AuthenticateUser(email=body.email, password=body.password), asynchronous=False
        )
    except InvalidCredentialsError:
        raise HTTPException(status_code=401, detail="Invalid email or password")

    if session_id:
        current_domain.process(MergeGuestCart(user_id=user_id, session_id=session_id), asynchronous=False)

    user = current_domain.repository_for(User).get(user_id)
    token = issue_session_token(user.id, user.email, user.is_admin)
    response.set_cookie(
        SESSION_COOKIE,
        token,
        max_age=get_session_ttl_days() * 24 * 3600,
        httponly=True,
        secure=is_production(),
        samesite="lax",
    )
    return LoginResponse(
        token=token,
        user=UserResponse.model_validate(user),
        requires_verification=not user.email_verified,
    )


@auth_router.post("/logout", response_model=StatusResponse)
async def logout(response: Response) -> StatusResponse:
    response.delete_cookie(SESSION_COOKIE)
    return StatusResponse()


@auth_router.get("/me", response_model=UserResponse)
async def me(user: User = Depends(require_user)) -> UserResponse:
    return UserResponse.model_validate(user)


@auth_router.post("/verify-email", response_model=MessageResponse)
async def verify_email(body: TokenRequest) -> MessageResponse:
    current_domain.process(VerifyEmail(token=body.token), asynchronous=False)
    return MessageResponse(message="Email verified")


@auth_router.post("/resend-verification", response_model=MessageResponse)
async def resend_verification(body: EmailRequest) -> MessageResponse:
    current_domain.process(ResendVerification(email=body.email), asynchronous=False)
    return MessageResponse(message="Verification email sent")


@auth_router.post("/forgot-password", response_model=MessageResponse)
async def forgot_password(body: EmailRequest) -> MessageResponse:
    current_domain.process(RequestPasswordReset(email=body.email), asynchronous=False)
    return MessageResponse(message="If an account exists for this email, a reset link has been sent")


@auth_router.post("/reset-password", response_model=MessageResponse)
async def reset_password(body: ResetPasswordRequest) -> MessageResponse:
    current_domain.process(ResetPassword(token=body.token, new_password=body.new_password), asynchronous=False)
    return MessageResponse(message="Password has been reset")


# --- Account ---


@account_router.put("/profile", response_model=UserResponse)
async def update_profile(body: UpdateProfileRequest, user: User = Depends(require_user)) -> UserResponse:
    current_domain.process(UpdateProfile(user_id=user.id, name=body.name, phone=body.phone), asynchronous=False)
    return UserResponse.model_validate(current_domain.repository_for(User).get(user.id))


@account_router.put("/password", response_model=StatusResponse)
async def change_password(body: ChangePasswordRequest, user: User = Depends(require_user)) -> StatusResponse:
    command = ChangePassword(
        user_id=user.id,
        current_password=body.current_password,
        new_password=body.new_password,
    )
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@account_router.get("/addresses", response_model=list[AddressResponse])
async def list_addresses(user: User = Depends(require_user)) -> list[AddressResponse]:
    return [AddressResponse.model_validate(a) for a in user.sorted_addresses()]


@account_router.post("/addresses", status_code=201, response_model=IdResponse)
async def add_address(body: AddressRequest, user: User = Depends(require_user)) -> IdResponse:
    result = current_domain.process(AddAddress(user_id=user.id, **body.model_dump()), asynchronous=False)
    return IdResponse(id=result)


@account_router.put("/addresses/{address_id}", response_model=StatusResponse)
async def update_address(
    address_id: str, body: UpdateAddressRequest, user: User = Depends(require_user)
) -> StatusResponse:
    command = UpdateAddress(user_id=user.id, address_id=address_id, **body.model_dump(exclude_none=True))
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@account_router.put("/addresses/{address_id}/default", response_model=StatusResponse)
async def set_default_address(address_id: str, user: User = Depends(require_user)) -> StatusResponse:
    current_domain.process(SetDefaultAddress(user_id=user.id, address_id=address_id), asynchronous=False)
    return StatusResponse()


@account_router.delete("/addresses/{address_id}", response_model=StatusResponse)
async def remove_address(address_id: str, user: User = Depends(require_user)) -> StatusResponse:
    current_domain.process(RemoveAddress(user_id=user.id, address_id=address_id), asynchronous=False)
    return StatusResponse()


# --- Admin ---


@admin_user_router.get("", response_model=list[UserResponse])
async def list_users(search: str | None = None, admin: User = Depends(require_admin)) -> list[UserResponse]:
    return [UserResponse.model_validate(u) for u in current_domain.repository_for(User).search(search)]


@admin_user_router.put("/{user_id}/role", response_model=StatusResponse)
async def set_admin_role(
    user_id: str, body: SetAdminRoleRequest, admin: User = Depends(require_admin)
) -> StatusResponse:
    command = SetAdminRole(user_id=user_id, is_admin=body.is_admin, acting_user_id=admin.id)
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@admin_user_router.delete("/{user_id}", response_model=StatusResponse)
async def delete_user(user_id: str, admin: User = Depends(require_admin)) -> StatusResponse:
    current_domain.process(DeleteUser(user_id=user_id, acting_user_id=admin.id), asynchronous=False)
    return StatusResponse()
