"""Tests for removing matched quantities from a cart."""

from bundle_pricing import CartItem, covers, quantities, remove


class TestRemove:
    """Tests for remove."""

    def test_reduces_matching_line(self, apple, bread) -> None:
        items = (CartItem(apple, 5), CartItem(bread, 1))
        assert remove(CartItem(apple, 2), items) == (CartItem(apple, 3), CartItem(bread, 1))

    def test_drops_line_consumed_exactly(self, apple, bread) -> None:
        items = (CartItem(apple, 2), CartItem(bread, 1))
        assert remove(CartItem(apple, 2), items) == (CartItem(bread, 1),)

    def test_drops_line_consumed_beyond_quantity(self, apple) -> None:
        assert remove(CartItem(apple, 3), (CartItem(apple, 1),)) == ()

    def test_keeps_order_of_other_lines(self, apple, bread, margarine) -> None:
        items = (CartItem(bread, 1), CartItem(apple, 4), CartItem(margarine, 2))
        assert remove(CartItem(apple, 1), items) == (
            CartItem(bread, 1),
            CartItem(apple, 3),
            CartItem(margarine, 2),
        )

    def test_every_matching_line_is_reduced(self, apple) -> None:
        items = (CartItem(apple, 3), CartItem(apple, 1))
        assert remove(CartItem(apple, 1), items) == (CartItem(apple, 2),)

    def test_no_match_returns_same_lines(self, apple, bread) -> None:
        items = (CartItem(bread, 1),)
        assert remove(CartItem(apple, 1), items) == items

    def test_does_not_mutate_argument(self, apple) -> None:
        items = [CartItem(apple, 3)]
        remove(CartItem(apple, 1), items)
        assert items == [CartItem(apple, 3)]


class TestCovers:
    """Tests for quantities and covers."""

    def test_quantities_sum_duplicate_lines(self, apple, bread) -> None:
        items = (CartItem(apple, 3), CartItem(bread, 1), CartItem(apple, 1))
        assert quantities(items) == {apple: 4, bread: 1}

    def test_covers_when_enough(self, bread, margarine) -> None:
        items = (CartItem(bread, 1), CartItem(margarine, 2))
        assert covers(items, {bread: 1, margarine: 2})

    def test_not_covered_when_short(self, bread, margarine) -> None:
        items = (CartItem(bread, 1), CartItem(margarine, 1))
        assert not covers(items, {bread: 1, margarine: 2})

    def test_not_covered_when_missing(self, bread, margarine) -> None:
        assert not covers((CartItem(margarine, 5),), {bread: 1})
