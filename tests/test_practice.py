from kurdish_vocab.core.practice import PracticeSession
from kurdish_vocab.data import WORDS


def test_cards_come_out_in_word_list_order_once():
    session = PracticeSession(WORDS)
    seen = []
    while session:
        card = session.next_card()
        assert session.answer("")
        seen.append(card.index)
    assert seen == list(range(len(WORDS)))
    assert session.finished
    assert session.revealed == len(WORDS)


def test_quit_is_case_insensitive_and_drops_the_rest():
    session = PracticeSession(WORDS)
    session.next_card()
    assert session.answer("anything")
    session.next_card()
    assert not session.answer("Q")
    assert not session
    assert not session.finished
    assert session.revealed == 1


def test_only_exact_q_quits():
    session = PracticeSession(WORDS)
    assert not session.is_quit("qq")
    assert not session.is_quit(" q")
    assert session.is_quit("q\n")


def test_empty_word_list():
    session = PracticeSession([])
    assert not session
    assert session.finished


def test_card_faces():
    card = PracticeSession(WORDS).next_card()
    assert card.front == "slaw"
    assert card.back == "hello  [greetings]"
