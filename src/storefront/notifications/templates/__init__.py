"""Template registry: maps email kinds to template classes.

Each template renders ``{"subject", "body", "html"}`` from a context dict
and names the sender mailbox it goes out from.
"""

from storefront.notifications.templates.admin_order_notification import AdminOrderNotificationTemplate
from storefront.notifications.templates.admin_reply import AdminReplyTemplate
from storefront.notifications.templates.contact_confirmation import ContactConfirmationTemplate
from storefront.notifications.templates.order_confirmation import OrderConfirmationTemplate
from storefront.notifications.templates.password_reset import PasswordResetTemplate
from storefront.notifications.templates.shipping_notification import ShippingNotificationTemplate
from storefront.notifications.templates.verification import VerificationTemplate
from storefront.notifications.templates.welcome import WelcomeTemplate

TEMPLATE_REGISTRY: dict[str, type] = {
    "verification": VerificationTemplate,
    "password_reset": PasswordResetTemplate,
    "welcome": WelcomeTemplate,
    "order_confirmation": OrderConfirmationTemplate,
    "admin_order_notification": AdminOrderNotificationTemplate,
    "shipping_notification": ShippingNotificationTemplate,
    "contact_confirmation": ContactConfirmationTemplate,
    "admin_reply": AdminReplyTemplate,
}


def get_template(kind: str):
    """Look up a template class by email kind."""
    template_cls = TEMPLATE_REGISTRY.get(kind)
    if template_cls is None:
        raise ValueError(f"No template registered for email kind: {kind}")
    return template_cls
