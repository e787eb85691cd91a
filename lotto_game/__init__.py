"""Console lotto game package."""

from __future__ import annotations

from collections.abc import Callable

from lotto_game.config import BaseConfig, get_config, load_environment
from lotto_game.game import LottoGame
from lotto_game.services.number_pool import RandomSource


def create_game(
    config: BaseConfig | None = None,
    reader: Callable[[], str] | None = None,
    writer: Callable[[str], None] | None = None,
    random_source: RandomSource | None = None,
) -> LottoGame:
    """Game factory.

    Returns:
        A LottoGame wired for a single purchase session. Console I/O defaults
        to ``input``/``print``.
    """
    if config is None:
        load_environment()
        config = get_config()()

    from lotto_game.logging_config import configure_logging
    from lotto_game.messages import get_messages
    from lotto_game.services.number_pool import NumberPool
    from lotto_game.services.result_service import ResultCalculator
    from lotto_game.services.store_service import Store
    from lotto_game.views.input_view import InputView
    from lotto_game.views.output_view import OutputView

    configure_logging(config)

    reader = reader or input
    writer = writer or print
    messages = get_messages(config.MESSAGE_LOCALE)
    pool = NumberPool(source=random_source, seed=config.LOTTO_RANDOM_SEED)

    return LottoGame(
        input_view=InputView(messages, reader=reader, writer=writer),
        output_view=OutputView(messages, writer=writer),
        store=Store(pool),
        calculator=ResultCalculator(decimals=config.PROFIT_RATE_DECIMALS),
    )
