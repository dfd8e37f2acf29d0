from .optional import Optional, EMPTY, empty, of
from .failure import Failure
from .logger import ConsoleLogger, default_logger
