from .describe import main as describe
from .complement import main as complement
from .pair import main as pair
