from watermonitor.thresholds import CRITICAL, GOOD, THRESHOLDS, WARNING, Bounds, classify, classify_reading


def test_max_bound_is_inclusive():
    assert classify(5, Bounds(max=5)) == GOOD
    assert classify(5.01, Bounds(max=5)) == WARNING
    assert classify(7.51, Bounds(max=5)) == CRITICAL


def test_min_bound_is_inclusive():
    assert classify(6.5, THRESHOLDS["ph"]) == GOOD
    assert classify(6.0, THRESHOLDS["ph"]) == WARNING
    assert classify(5.0, THRESHOLDS["ph"]) == CRITICAL


def test_zero_max_has_no_warning_tier():
    coliform = THRESHOLDS["total_coliform"]
    assert classify(0, coliform) == GOOD
    assert classify(1, coliform) == CRITICAL
    assert classify(0.01, coliform) == CRITICAL


def test_two_sided_bounds():
    chlorine = THRESHOLDS["chlorine"]
    assert classify(0.18, chlorine) == WARNING
    assert classify(0.1, chlorine) == CRITICAL
    assert classify(6, chlorine) == WARNING
    assert classify(8, chlorine) == CRITICAL


def test_classify_reading_covers_every_parameter():
    status = classify_reading(
        {
            "ph": 7.2,
            "turbidity": 6,
            "temperature": 30,
            "dissolved_oxygen": 3,
            "total_coliform": 0,
            "ecoli": 2,
            "chlorine": 1.0,
        }
    )
    assert status == {
        "ph": GOOD,
        "turbidity": WARNING,
        "temperature": WARNING,
        "dissolved_oxygen": CRITICAL,
        "total_coliform": GOOD,
        "ecoli": CRITICAL,
        "chlorine": GOOD,
    }
