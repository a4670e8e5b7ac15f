"""User registration: command and handler."""

from protean import handle
from protean.fields import Float, String
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.user.user import User, UserRole


@storefront.command(part_of="User")
class RegisterUser:
    """Create a shopper account with an opening balance."""

    email: String(required=True, max_length=254)
    first_name: String(required=True, max_length=100)
    last_name: String(required=True, max_length=100)
    balance: Float(default=0.0, min_value=0.0)
    role: String(choices=UserRole, default=UserRole.USER.value)


@storefront.command_handler(part_of=User)
class RegisterUserHandler:
    @handle(RegisterUser)
    def register_user(self, command):
        user = User(
            email=command.email,
            first_name=command.first_name,
            last_name=command.last_name,
            balance=command.balance or 0.0,
            role=command.role or UserRole.USER.value,
        )
        current_domain.repository_for(User).add(user)
        return str(user.id)
