import pytest

from flashcards.deck import Deck, DuplicateCardError, DuplicateDefinitionError
from flashcards.models import Card


def test_add_keeps_insertion_order_and_zero_mistakes() -> None:
    deck = Deck()
    deck.add("France", "Paris")
    deck.add("Germany", "Berlin")
    assert deck.terms() == ("France", "Germany")
    assert list(deck) == [Card("France", "Paris", 0), Card("Germany", "Berlin", 0)]


def test_add_rejects_duplicate_term_and_definition() -> None:
    deck = Deck()
    deck.add("France", "Paris")
    with pytest.raises(DuplicateCardError, match='The card "France" already exists.'):
        deck.add("France", "Lyon")
    with pytest.raises(DuplicateDefinitionError, match='The definition "Paris" already exists.'):
        deck.add("Texas", "Paris")
    with pytest.raises(DuplicateCardError):
        deck.require_new_term("France")
    deck.require_new_term("Texas")
    assert len(deck) == 1


def test_remove_then_readd_same_definition_under_new_term() -> None:
    deck = Deck()
    deck.add("France", "Paris")
    assert deck.remove("France") is True
    assert deck.has_definition("Paris") is False
    deck.add("Capital of France", "Paris")
    assert deck.term_for_definition("Paris") == "Capital of France"


def test_remove_missing_returns_false() -> None:
    deck = Deck()
    assert deck.remove("nothing") is False


def test_terms_cache_invalidated_on_add_and_remove() -> None:
    deck = Deck()
    deck.add("a", "1")
    assert deck.terms() == ("a",)
    deck.add("b", "2")
    assert deck.terms() == ("a", "b")
    deck.remove("a")
    assert deck.terms() == ("b",)


def test_upsert_overwrites_in_place_and_reindexes_definition() -> None:
    deck = Deck()
    deck.add("France", "Paris")
    deck.add("Germany", "Berlin")
    deck.upsert(Card("France", "Lyon", 4))
    assert deck.terms() == ("France", "Germany")
    assert deck.definition("France") == "Lyon"
    assert deck.mistakes("France") == 4
    assert deck.has_definition("Paris") is False
    assert deck.term_for_definition("Lyon") == "France"


def test_upsert_appends_new_terms() -> None:
    deck = Deck()
    deck.add("France", "Paris")
    deck.upsert(Card("Spain", "Madrid", 1))
    assert deck.terms() == ("France", "Spain")


def test_shared_definition_from_upsert_survives_removal_of_one_owner() -> None:
    deck = Deck()
    deck.add("France", "Paris")
    deck.upsert(Card("Texas town", "Paris", 0))
    assert deck.term_for_definition("Paris", exclude="France") == "Texas town"
    deck.remove("France")
    assert deck.term_for_definition("Paris") == "Texas town"


def test_upsert_rejects_negative_mistakes() -> None:
    with pytest.raises(ValueError):
        Deck().upsert(Card("a", "b", -1))


def test_hardest_reports_all_ties_in_order() -> None:
    deck = Deck()
    for term, definition in [("a", "1"), ("b", "2"), ("c", "3")]:
        deck.add(term, definition)
    deck.record_mistake("c")
    deck.record_mistake("a")
    hardest = deck.hardest()
    assert hardest.terms == ("a", "c")
    assert hardest.mistakes == 1
    deck.record_mistake("c")
    assert deck.hardest().terms == ("c",)


def test_hardest_without_mistakes_is_empty() -> None:
    deck = Deck()
    deck.add("a", "1")
    hardest = deck.hardest()
    assert hardest.mistakes == 0
    assert hardest.terms == ()


def test_reset_mistakes_keeps_cards() -> None:
    deck = Deck()
    deck.add("a", "1")
    deck.record_mistake("a")
    deck.reset_mistakes()
    assert deck.mistakes("a") == 0
    assert "a" in deck
