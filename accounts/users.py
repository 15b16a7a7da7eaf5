from dataclasses import dataclass
from functools import lru_cache

from django.contrib.auth.hashers import check_password, make_password

ADMIN_ACCOUNT_ID = 'admin'
ADMIN_ROLE = 'admin'


@dataclass(frozen=True)
class AdminAccount:
    id: str
    username: str
    password_hash: str
    role: str = ADMIN_ROLE
    first_name: str = ''

    def check_password(self, raw_password):
        return check_password(raw_password, self.password_hash)

    def profile(self):
        return {
            'id': self.id,
            'username': self.username,
            'firstName': self.first_name,
            'role': self.role,
        }


class AccountDirectory:
    """Accounts allowed to sign in to the admin API, indexed by username and id."""

    def __init__(self, accounts):
        self._by_username = {account.username: account for account in accounts}
        self._by_id = {account.id: account for account in accounts}

    def __len__(self):
        return len(self._by_id)

    def get(self, account_id):
        return self._by_id.get(account_id)

    def find_by_username(self, username):
        return self._by_username.get(username)

    def authenticate(self, username, password):
        account = self.find_by_username(username)
        if account is None:
            # Run the hasher anyway so response time does not depend on the username.
            make_password(password)
            return None
        if not account.check_password(password):
            return None
        return account


@lru_cache(maxsize=8)
def get_directory(config):
    if config.password_mode == 'hashed':
        password_hash = config.admin_password_hash
    else:
        password_hash = make_password(config.admin_password)
    admin = AdminAccount(
        id=ADMIN_ACCOUNT_ID,
        username=config.admin_username,
        password_hash=password_hash,
        role=ADMIN_ROLE,
        first_name='Admin',
    )
    return AccountDirectory([admin])
