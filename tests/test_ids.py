from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

from pretty_graphs.ids import IdGenerator


def test_ids_share_a_counter_value() -> None:
    grad_id, clip_id = IdGenerator(start=7).next_ids()
    assert grad_id == "pg-grad-7"
    assert clip_id == "pg-bars-clip-7"


def test_ids_are_unique_across_threads() -> None:
    gen = IdGenerator()
    with ThreadPoolExecutor(max_workers=8) as pool:
        ids = list(pool.map(lambda _: gen.next_ids(), range(500)))
    assert len({g for g, _ in ids}) == 500
    assert len({c for _, c in ids}) == 500
