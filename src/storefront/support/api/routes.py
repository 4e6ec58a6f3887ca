"""Contact form and the admin inbox."""

from fastapi import APIRouter, Depends
from protean.utils.globals import current_domain

from storefront.identity.session import require_admin
from storefront.identity.user.user import User
from storefront.support.api.schemas import ContactRequest, IdResponse, MessageResponse, ReplyRequest, StatusResponse
from storefront.support.management import ArchiveMessage, MarkMessageRead, ReplyToMessage, SubmitContactMessage
from storefront.support.message import Message, MessageStatus

contact_router = APIRouter(prefix="/contact", tags=["support"])
admin_message_router = APIRouter(prefix="/admin/messages", tags=["admin"])


@contact_router.post("", status_code=201, response_model=IdResponse)
async def submit_contact_message(body: ContactRequest) -> IdResponse:
    command = SubmitContactMessage(**body.model_dump(exclude_none=True))
    return IdResponse(id=current_domain.process(command, asynchronous=False))


@admin_message_router.get("", response_model=list[MessageResponse])
async def list_messages(
    status: MessageStatus | None = None, admin: User = Depends(require_admin)
) -> list[MessageResponse]:
    messages = current_domain.repository_for(Message).list_messages(status=status.value if status else None)
    return [MessageResponse.model_validate(m) for m in messages]


@admin_message_router.get("/{message_id}", response_model=MessageResponse)
async def get_message(message_id: str, admin: User = Depends(require_admin)) -> MessageResponse:
    """Opening a message marks it read."""
    current_domain.process(MarkMessageRead(message_id=message_id), asynchronous=False)
    return MessageResponse.model_validate(current_domain.repository_for(Message).get(message_id))


@admin_message_router.post("/{message_id}/reply", status_code=201, response_model=IdResponse)
async def reply_to_message(message_id: str, body: ReplyRequest, admin: User = Depends(require_admin)) -> IdResponse:
    command = ReplyToMessage(message_id=message_id, reply_text=body.reply_text, replied_by=str(admin.id))
    return IdResponse(id=current_domain.process(command, asynchronous=False))


@admin_message_router.put("/{message_id}/archive", response_model=StatusResponse)
async def archive_message(message_id: str, admin: User = Depends(require_admin)) -> StatusResponse:
    current_domain.process(ArchiveMessage(message_id=message_id), asynchronous=False)
    return StatusResponse()
