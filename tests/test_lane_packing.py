import random
from itertools import combinations

from timeline_layout.lane_packing import (
    do_times_overlap,
    get_lane_count,
    get_max_concurrent_items,
    group_by_lane,
    pack_items_into_lanes,
)
from timeline_layout.models import ItemCategory, PackingItem


def _random_items(rng: random.Random, count: int) -> list[PackingItem]:
    items = []
    for i in range(count):
        start = rng.randrange(300, 1380, 5)
        end = start + rng.choice([5, 15, 30, 45, 60, 90, 180])
        items.append(PackingItem(f"i{i}", start, end, rng.choice(list(ItemCategory))))
    return items


def test_empty_input() -> None:
    assert pack_items_into_lanes([]) == []
    assert get_lane_count([]) == 1
    assert get_max_concurrent_items([]) == 0
    assert group_by_lane([]) == {}


def test_touching_items_share_a_lane(make_item) -> None:
    packed = pack_items_into_lanes([make_item(480, 540), make_item(540, 600)])
    assert [item.lane for item in packed] == [0, 0]
    assert get_lane_count(packed) == 1


def test_overlapping_items_are_split(make_item) -> None:
    first, second = make_item(480, 600), make_item(540, 660)
    packed = {item.id: item.lane for item in pack_items_into_lanes([second, first])}
    assert packed == {first.id: 0, second.id: 1}


def test_longer_item_placed_first_on_equal_start(make_item) -> None:
    short, long = make_item(480, 510), make_item(480, 600)
    packed = pack_items_into_lanes([short, long])
    assert [item.id for item in packed] == [long.id, short.id]
    assert [item.lane for item in packed] == [0, 1]


def test_freed_lane_is_reused_before_opening_a_new_one(make_item) -> None:
    a, b, c = make_item(300, 1380), make_item(480, 540), make_item(500, 700)
    d = make_item(545, 600)
    lanes = {item.id: item.lane for item in pack_items_into_lanes([a, b, c, d])}
    assert lanes == {a.id: 0, b.id: 1, c.id: 2, d.id: 1}


def test_packed_items_keep_their_ranges(make_item) -> None:
    item = make_item(600, 645, ItemCategory.WORKOUT)
    (packed,) = pack_items_into_lanes([item])
    assert (packed.id, packed.start_minutes, packed.end_minutes, packed.category, packed.lane) == (
        item.id, 600, 645, ItemCategory.WORKOUT, 0
    )


def test_do_times_overlap() -> None:
    assert do_times_overlap(480, 600, 540, 660)
    assert do_times_overlap(480, 600, 500, 510)
    assert not do_times_overlap(480, 540, 540, 600)
    assert not do_times_overlap(480, 540, 600, 660)


def test_do_times_overlap_is_symmetric() -> None:
    rng = random.Random(3)
    for _ in range(500):
        a = sorted(rng.sample(range(0, 1440), 2))
        b = sorted(rng.sample(range(0, 1440), 2))
        assert do_times_overlap(*a, *b) == do_times_overlap(*b, *a)


def test_max_concurrent_ignores_touching_items(make_item) -> None:
    assert get_max_concurrent_items([make_item(480, 540), make_item(540, 600)]) == 1
    assert get_max_concurrent_items([make_item(480, 600), make_item(540, 660), make_item(550, 560)]) == 3


def test_group_by_lane_keeps_packer_order(make_item) -> None:
    packed = pack_items_into_lanes(
        [make_item(600, 660), make_item(480, 540), make_item(500, 620), make_item(540, 560)]
    )
    lanes = group_by_lane(packed)
    assert sorted(lanes) == [0, 1]
    assert [item.start_minutes for item in lanes[0]] == [480, 540, 600]
    assert [item.start_minutes for item in lanes[1]] == [500]


def test_no_overlap_within_a_lane() -> None:
    rng = random.Random(11)
    for _ in range(200):
        packed = pack_items_into_lanes(_random_items(rng, rng.randint(1, 30)))
        for lane_items in group_by_lane(packed).values():
            for a, b in combinations(lane_items, 2):
                assert not do_times_overlap(a.start_minutes, a.end_minutes, b.start_minutes, b.end_minutes)


def test_lane_count_matches_max_concurrency() -> None:
    rng = random.Random(42)
    for _ in range(300):
        items = _random_items(rng, rng.randint(1, 40))
        assert get_lane_count(pack_items_into_lanes(items)) == get_max_concurrent_items(items)


def test_packing_is_deterministic() -> None:
    items = _random_items(random.Random(5), 25)
    assert pack_items_into_lanes(items) == pack_items_into_lanes(list(items))
