from .structured_log import get_session_id, log_event, log_error
from .errors import humanize
