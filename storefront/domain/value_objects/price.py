"""Price value object (alias to Money for domain clarity)"""

from .money import Money

Price = Money
