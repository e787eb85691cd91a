from lotto_game.models.customer import Customer
from lotto_game.models.prize import PrizeTier
from lotto_game.models.ticket import Ticket
from lotto_game.models.winning_draw import WinningDraw
from lotto_game.services.checker_service import Checker
from lotto_game.services.store_service import Store


def test_list_tickets_returns_copy():
    customer = Customer()
    customer.receive_tickets([Ticket([1, 2, 3, 4, 5, 6])])

    listed = customer.list_tickets()
    listed.clear()

    assert customer.list_tickets() == [Ticket([1, 2, 3, 4, 5, 6])]


def test_receive_tickets_copies_batch():
    batch = [Ticket([1, 2, 3, 4, 5, 6])]
    customer = Customer()
    customer.receive_tickets(batch)
    batch.append(Ticket([7, 8, 9, 10, 11, 12]))

    assert len(customer.list_tickets()) == 1


def test_request_check_forwards_tickets():
    customer = Customer()
    customer.receive_tickets([Ticket([1, 2, 3, 4, 5, 7]), Ticket([1, 2, 3, 4, 5, 6])])

    tally = customer.request_check(Checker(), WinningDraw.of([1, 2, 3, 4, 5, 6], 7))

    assert tally.count(PrizeTier.SECOND) == 1
    assert tally.count(PrizeTier.FIRST) == 1


def test_insert_money_hands_amount_to_store():
    store = Store()
    Customer().insert_money(store, 14000)
    store.validate_money()
    assert store.ticket_count() == 14
