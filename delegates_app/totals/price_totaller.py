"""Running price totals fed one book at a time."""

from decimal import Decimal

from ..catalog.models import Book, PriceLike, to_price
from ..errors import EmptyAccumulatorError
from ..logging.config import get_logger

logger = get_logger(__name__)


class PriceTotaller:
    """Counts books and sums their prices; pass add_book_to_total as a callback."""

    def __init__(self):
        self.count = 0
        self.total = Decimal("0")
        self.logger = logger

    def add_book_to_total(self, book: Book) -> None:
        self.record(book.price)

    def record(self, value: PriceLike) -> None:
        self.count += 1
        self.total += to_price(value)

    def average(self) -> Decimal:
        """
        Average recorded price.

        Returns:
            total / count as a Decimal

        Raises:
            EmptyAccumulatorError: nothing has been recorded yet
        """
        if self.count == 0:
            self.logger.error("Average requested with no recorded prices")
            raise EmptyAccumulatorError(
                "Cannot average zero prices",
                accumulator=type(self).__name__,
                context={"count": self.count, "total": str(self.total)},
            )
        return self.total / self.count
