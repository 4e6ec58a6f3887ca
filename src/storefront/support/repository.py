from storefront.domain import storefront
from storefront.support.message import Message, MessageStatus


@storefront.repository(part_of=Message)
class MessageRepository:
    def list_messages(self, status: str | None = None) -> list[Message]:
        query = self._dao.query
        if status:
            query = query.filter(status=status)
        return query.order_by("-created_at").limit(None).all().items

    def count_unread(self) -> int:
        return self._dao.query.filter(status=MessageStatus.UNREAD.value).all().total
