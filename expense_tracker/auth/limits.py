from flask_limiter import Limiter
from flask_limiter.util import get_remote_address

limiter = Limiter(key_func=get_remote_address)

# signup and login draw from one bucket per client IP
auth_limit = limiter.shared_limit("5 per 15 minutes", scope="auth")
