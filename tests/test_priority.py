from modevents.priority import Priority


def test_documented_values():
    assert Priority(0) is Priority.LOWEST
    assert Priority(25) is Priority.LOW
    assert Priority(50) is Priority.NORMAL
    assert Priority(75) is Priority.HIGH
    assert Priority(100) is Priority.HIGHEST
    assert Priority(125) is Priority.CRITICAL


def test_all_is_highest_first():
    levels = Priority.all()
    assert list(levels) == sorted(levels, reverse=True)
    assert levels[0] is Priority.CRITICAL
    assert levels[-1] is Priority.LOWEST


def test_all_covers_every_member():
    assert set(Priority.all()) == set(Priority)
    assert len(Priority.all()) == len(Priority)


def test_ordering_between_levels():
    levels = list(Priority.all())
    assert levels.index(Priority.HIGH) < levels.index(Priority.NORMAL) < levels.index(Priority.LOW)
    assert max(Priority.all()) is Priority.CRITICAL
    assert min(Priority.all()) is Priority.LOWEST