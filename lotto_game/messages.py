"""Console message templates, keyed by locale then message key.

Error templates are looked up as ``error.<code>`` using ``AppError.code``.
"""

from __future__ import annotations

MessageTable = dict[str, str]

MESSAGES: dict[str, MessageTable] = {
    "ko": {
        "ask_money": "구입금액을 입력해 주세요.",
        "purchased_count": "{count}개를 구매했습니다.",
        "ticket": "[{numbers}]",
        "ask_winning_numbers": "당첨 번호를 입력해 주세요.",
        "ask_bonus_number": "보너스 번호를 입력해 주세요.",
        "stats_header": "당첨 통계\n---",
        "prize_line": "{match_count}개 일치 ({payout:,}원) - {count}개",
        "prize_line_bonus": "{match_count}개 일치, 보너스 볼 일치 ({payout:,}원) - {count}개",
        "profit_rate": "총 수익률은 {rate}%입니다.",
        "error.below_minimum": "[ERROR] 구입 금액은 1,000원 이상이어야 합니다.",
        "error.not_divisible": "[ERROR] 구입 금액은 1,000원 단위여야 합니다.",
        "error.wrong_count": "[ERROR] 로또 번호는 6개여야 합니다.",
        "error.duplicate_number": "[ERROR] 로또 번호는 중복될 수 없습니다.",
        "error.out_of_range": "[ERROR] 로또 번호는 1부터 45 사이의 숫자여야 합니다.",
        "error.invalid_bonus": "[ERROR] 보너스 번호는 당첨 번호와 중복될 수 없습니다.",
        "error.invalid_input": "[ERROR] 숫자를 입력해야 합니다.",
    },
    "en": {
        "ask_money": "Enter the purchase amount.",
        "purchased_count": "You bought {count} tickets.",
        "ticket": "[{numbers}]",
        "ask_winning_numbers": "Enter the winning numbers.",
        "ask_bonus_number": "Enter the bonus number.",
        "stats_header": "Winning statistics\n---",
        "prize_line": "{match_count} matches ({payout:,} KRW) - {count} tickets",
        "prize_line_bonus": "{match_count} matches + bonus ball ({payout:,} KRW) - {count} tickets",
        "profit_rate": "Total profit rate is {rate}%.",
        "error.below_minimum": "[ERROR] The purchase amount must be at least 1,000 KRW.",
        "error.not_divisible": "[ERROR] The purchase amount must be a multiple of 1,000 KRW.",
        "error.wrong_count": "[ERROR] A ticket needs exactly 6 numbers.",
        "error.duplicate_number": "[ERROR] Ticket numbers must not repeat.",
        "error.out_of_range": "[ERROR] Numbers must be between 1 and 45.",
        "error.invalid_bonus": "[ERROR] The bonus number must differ from the winning numbers.",
        "error.invalid_input": "[ERROR] Please enter numbers only.",
    },
}

DEFAULT_LOCALE = "ko"


def get_messages(locale: str | None = None) -> MessageTable:
    """Message table for ``locale``, falling back to Korean."""

    key = (locale or DEFAULT_LOCALE).lower().strip()
    return MESSAGES.get(key, MESSAGES[DEFAULT_LOCALE])
