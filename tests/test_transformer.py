import hashlib

import orjson
import pytest
from pydantic import ValidationError

from pricing_worker.apps.worker.transformer import EventTransformer, apply_discount, fingerprint
from pricing_worker.utils.discounts import discount_for
from pricing_worker.utils.schemas import PricingEvent

RAW_A = '{"price":100,"wday":2,"index":"e1"}'
RAW_B = '{"price":50,"wday":9,"index":"e2"}'


@pytest.fixture
def transformer():
    return EventTransformer()


def test_scenario_a_discounted_total_and_raw_fingerprint(transformer):
    event, signature = transformer.process(RAW_A)

    assert event.index == "e1"
    assert event.total == 90
    assert signature == hashlib.md5(RAW_A.encode("utf-8")).hexdigest()


def test_scenario_b_out_of_range_weekday_keeps_price(transformer):
    event, _ = transformer.process(RAW_B)

    assert event.index == "e2"
    assert event.total == 50


@pytest.mark.parametrize("wday", [-1, 0, 1, 2, 3, 4, 5, 6, 7, 100])
@pytest.mark.parametrize("price", [0, 1, 19.99, 100, 1234.5])
def test_total_formula(transformer, price, wday):
    raw = orjson.dumps({"price": price, "wday": wday, "index": 1}).decode()

    event, _ = transformer.process(raw)

    assert event.total == price * (1 - discount_for(wday) / 100)


def test_fingerprint_is_deterministic():
    assert fingerprint(RAW_A) == fingerprint(RAW_A)
    assert fingerprint(RAW_A) == fingerprint(RAW_A.encode("utf-8"))
    assert len(fingerprint(RAW_A)) == 32
    assert set(fingerprint(RAW_A)) <= set("0123456789abcdef")


def test_fingerprint_ignores_pricing(transformer):
    _, first = transformer.process(RAW_A)
    _, second = transformer.process(RAW_A)

    assert first == second == fingerprint(RAW_A)


def test_fingerprint_changes_with_raw_bytes(transformer):
    reordered = '{"wday":2,"price":100,"index":"e1"}'
    spaced = '{"price": 100,"wday":2,"index":"e1"}'

    event_a, fp_a = transformer.process(RAW_A)
    event_r, fp_r = transformer.process(reordered)
    _, fp_s = transformer.process(spaced)

    assert event_a.total == event_r.total
    assert len({fp_a, fp_r, fp_s}) == 3


def test_extra_fields_are_ignored(transformer):
    raw = '{"index":7,"wday":1,"payload":"x","price":20.0,"user_id":3}'

    event, _ = transformer.process(raw)

    assert event.index == 7
    assert event.total == 20.0 * (1 - 5 / 100)


def test_malformed_json_raises(transformer):
    with pytest.raises(orjson.JSONDecodeError):
        transformer.process('{"price":100,')


@pytest.mark.parametrize(
    "raw",
    [
        '{"price":100,"index":"e1"}',
        '{"price":100,"wday":null,"index":"e1"}',
        '{"price":100,"wday":2.5,"index":"e1"}',
        '{"price":100,"wday":"monday","index":"e1"}',
    ],
)
def test_missing_or_invalid_weekday_gets_no_discount(transformer, raw):
    event, signature = transformer.process(raw)

    assert event.total == 100
    assert signature == fingerprint(raw)


def test_integral_float_weekday_is_discounted(transformer):
    event, _ = transformer.process('{"price":100,"wday":2.0,"index":"e1"}')

    assert event.total == 100 * (1 - 10 / 100)


@pytest.mark.parametrize(
    "raw",
    [
        '{"wday":2,"index":"e1"}',
        '{"price":100,"wday":2}',
        '{"price":"cheap","wday":2,"index":"e1"}',
        "[1, 2, 3]",
    ],
)
def test_missing_price_or_index_raises(transformer, raw):
    with pytest.raises(ValidationError):
        transformer.process(raw)


def test_bytes_payload_matches_text_payload(transformer):
    event, signature = transformer.process(RAW_A.encode("utf-8"))

    assert event.total == 90
    assert signature == fingerprint(RAW_A)


def test_non_utf8_payload_is_a_parse_failure(transformer):
    with pytest.raises(orjson.JSONDecodeError):
        transformer.process(b'{"price":100,"wday":2,"index":"\xff"}')


def test_apply_discount_sets_total():
    event = PricingEvent(price=80, wday=6, index="x")

    assert apply_discount(event).total == 80 * (1 - 30 / 100)
