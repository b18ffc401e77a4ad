from .SubBlockOutputStream import SubBlockOutputStream
from .SubBlockInputStream import SubBlockInputStream
