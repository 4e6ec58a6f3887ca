"""User aggregate root with the Address entity.

A user is a shopper account (or an administrator, when ``is_admin`` is set).
Email verification and password reset both work with opaque one-time tokens
that carry an expiry timestamp.
"""

from datetime import timedelta

from protean import atomic_change, invariant
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import Boolean, DateTime, HasMany, String

from storefront.domain import storefront
from storefront.shared.clock import now

MAX_ADDRESSES = 10
VERIFICATION_TOKEN_TTL = timedelta(hours=24)
PASSWORD_RESET_TOKEN_TTL = timedelta(hours=1)

_ADDRESS_FIELDS = ("label", "name", "address_line1", "address_line2", "city", "postal_code", "country", "phone")


@storefront.entity(part_of="User")
class Address:
    """A saved shipping address.

    A user may keep up to 10 addresses, exactly one of which is the default
    whenever any exist.
    """

    label: String(max_length=50)
    name: String(required=True, max_length=200)
    address_line1: String(required=True, max_length=255)
    address_line2: String(max_length=255)
    city: String(required=True, max_length=100)
    postal_code: String(required=True, max_length=20)
    country: String(required=True, max_length=2)
    phone: String(max_length=30)
    is_default: Boolean(default=False)
    created_at: DateTime(default=now)


@storefront.aggregate
class User:
    email: String(required=True, max_length=254, unique=True)
    password_hash: String(required=True, max_length=255)
    name: String(max_length=200)
    phone: String(max_length=30)
    is_admin: Boolean(default=False)
    email_verified: Boolean(default=False)
    verification_token: String(max_length=100)
    verification_token_expires: DateTime()
    password_reset_token: String(max_length=100)
    password_reset_expires: DateTime()
    addresses: HasMany(Address)
    last_login_at: DateTime()
    created_at: DateTime(default=now)
    updated_at: DateTime(default=now)

    @invariant.post
    def addresses_cannot_exceed_maximum(self):
        if len(self.addresses) > MAX_ADDRESSES:
            raise ValidationError({"addresses": [f"Cannot have more than {MAX_ADDRESSES} addresses"]})

    @invariant.post
    def exactly_one_default_address_when_addresses_exist(self):
        if not self.addresses:
            return
        defaults = [a for a in self.addresses if a.is_default]
        if len(defaults) != 1:
            raise ValidationError({"addresses": ["Exactly one address must be marked as default"]})

    @classmethod
    def register(cls, email, password_hash, verification_token, name=None, phone=None):
        from storefront.identity.user.events import UserRegistered

        timestamp = now()
        user = cls(
            email=email,
            password_hash=password_hash,
            name=name,
            phone=phone,
            email_verified=False,
            verification_token=verification_token,
            verification_token_expires=timestamp + VERIFICATION_TOKEN_TTL,
            created_at=timestamp,
            updated_at=timestamp,
        )
        user.raise_(
            UserRegistered(
                user_id=user.id,
                email=email,
                name=name,
                verification_token=verification_token,
            )
        )
        return user

    # -------------------------------------------------------------------
    # Email verification
    # -------------------------------------------------------------------
    def verify_email(self, token):
        from storefront.identity.user.events import EmailVerified

        if not self.verification_token or token != self.verification_token:
            raise ValidationError({"token": ["Invalid verification token"]})
        if self.verification_token_expires is None or self.verification_token_expires < now():
            raise ValidationError({"token": ["Verification token has expired"]})

        self.email_verified = True
        self.verification_token = None
        self.verification_token_expires = None
        self.updated_at = now()

        self.raise_(EmailVerified(user_id=self.id, email=self.email, name=self.name))

    def reissue_verification(self, token):
        from storefront.identity.user.events import VerificationRequested

        if self.email_verified:
            raise ValidationError({"email": ["Email is already verified"]})

        self.verification_token = token
        self.verification_token_expires = now() + VERIFICATION_TOKEN_TTL
        self.updated_at = now()

        self.raise_(
            VerificationRequested(
                user_id=self.id,
                email=self.email,
                name=self.name,
                verification_token=token,
            )
        )

    # -------------------------------------------------------------------
    # Passwords
    # -------------------------------------------------------------------
    def request_password_reset(self, token):
        from storefront.identity.user.events import PasswordResetRequested

        self.password_reset_token = token
        self.password_reset_expires = now() + PASSWORD_RESET_TOKEN_TTL
        self.updated_at = now()

        self.raise_(
            PasswordResetRequested(
                user_id=self.id,
                email=self.email,
                name=self.name,
                reset_token=token,
            )
        )

    def reset_password(self, token, new_password_hash):
        if not self.password_reset_token or token != self.password_reset_token:
            raise ValidationError({"token": ["Invalid or expired reset token"]})
        if self.password_reset_expires is None or self.password_reset_expires < now():
            raise ValidationError({"token": ["Invalid or expired reset token"]})

        self.password_hash = new_password_hash
        self.password_reset_token = None
        self.password_reset_expires = None
        self.updated_at = now()

    def change_password(self, new_password_hash):
        self.password_hash = new_password_hash
        self.updated_at = now()

    # -------------------------------------------------------------------
    # Profile and role
    # -------------------------------------------------------------------
    def record_login(self):
        self.last_login_at = now()

    def update_profile(self, name=None, phone=None):
        if name is not None:
            self.name = name
        if phone is not None:
            self.phone = phone
        self.updated_at = now()

    def set_admin(self, is_admin):
        self.is_admin = bool(is_admin)
        self.updated_at = now()

    # -------------------------------------------------------------------
    # Addresses
    # -------------------------------------------------------------------
    def _get_address(self, address_id):
        address = next((a for a in self.addresses if str(a.id) == str(address_id)), None)
        if address is None:
            raise ObjectNotFoundError(f"Address {address_id} not found")
        return address

    def add_address(self, is_default=False, **fields):
        # First address is always default
        if not self.addresses:
            is_default = True

        with atomic_change(self):
            if is_default:
                for addr in self.addresses:
                    if addr.is_default:
                        addr.is_default = False

            address = Address(
                is_default=is_default,
                **{k: v for k, v in fields.items() if k in _ADDRESS_FIELDS},
            )
            self.add_addresses(address)

        self.updated_at = now()
        return address

    def update_address(self, address_id, is_default=None, **fields):
        address = self._get_address(address_id)

        with atomic_change(self):
            for field, value in fields.items():
                if field in _ADDRESS_FIELDS and value is not None:
                    setattr(address, field, value)
            if is_default:
                for addr in self.addresses:
                    addr.is_default = str(addr.id) == str(address.id)

        self.updated_at = now()

    def remove_address(self, address_id):
        address = self._get_address(address_id)
        was_default = address.is_default

        with atomic_change(self):
            self.remove_addresses(address)
            # Promote the first remaining address when the default goes away
            if was_default and self.addresses:
                self.addresses[0].is_default = True

        self.updated_at = now()

    def set_default_address(self, address_id):
        address = self._get_address(address_id)

        with atomic_change(self):
            for addr in self.addresses:
                if addr.is_default:
                    addr.is_default = False
            address.is_default = True

        self.updated_at = now()

    def sorted_addresses(self):
        """Default address first, then most recently added."""
        newest_first = sorted(self.addresses, key=lambda a: a.created_at, reverse=True)
        return sorted(newest_first, key=lambda a: not a.is_default)
