#!filepath: tests/core/test_cursor_combinators.py
import pytest

from iter_cursor import Iter, NO_VALUE, InvalidArgumentError


# ============================================================
# 1. map
# ============================================================
def test_map_with_next(iterator):
    iterator.map(lambda value: value * 2)
    assert iterator.next() == 2
    assert iterator.next() == 10


def test_map_with_collect(iterator):
    iterator.map(lambda value: value * 2)
    assert iterator.collect() == [2, 10, 6, 18, 14]


def test_map_returning_none_is_kept():
    assert Iter([1, 2]).map(lambda x: None).collect() == [None, None]


# ============================================================
# 2. filter / find
# ============================================================
def test_filter_with_collect(iterator):
    iterator.filter(lambda value: value > 4)
    assert iterator.collect() == [5, 9, 7]


def test_filter_with_next(iterator):
    iterator.filter(lambda value: value > 4)
    assert iterator.next() == 5
    assert iterator.next() == 9


def test_filter_with_prev_skips_backwards(iterator):
    iterator.collect()
    iterator.filter(lambda value: value < 4)
    assert iterator.prev() == 3
    assert iterator.prev() == 1
    assert iterator.prev() is NO_VALUE


def test_find_returns_first_match(iterator):
    assert iterator.find(lambda value: value < 9) == 1


def test_find_twice_keeps_both_filters(iterator):
    assert iterator.find(lambda value: value < 9) == 1
    assert iterator.find(lambda value: value > 4) == 5
    # 两个 filter 都留在 pipeline 中：9 被第一个过滤掉
    assert iterator.next() == 7


def test_map_then_find(iterator):
    iterator.map(lambda value: value * 2)
    assert iterator.find(lambda value: value > 10) == 18


def test_find_without_match_is_no_value(iterator):
    assert iterator.find(lambda value: value > 100) is NO_VALUE
    assert iterator.has_next() is False


# ============================================================
# 3. some / every
# ============================================================
def test_some(iterator):
    assert iterator.some(lambda value: value > 4) is True
    assert iterator.some(lambda value: value > 10) is False


def test_some_then_some_narrows_remainder(iterator):
    assert iterator.some(lambda value: value > 7) is True
    assert iterator.some(lambda value: value > 7) is False


def test_some_counts_falsy_match_as_found():
    assert Iter([3, 0]).some(lambda value: value == 0) is True


def test_every_false_when_one_fails(iterator):
    assert iterator.every(lambda value: value > 5) is False


def test_every_after_some(iterator):
    assert iterator.some(lambda value: value > 5) is True
    assert iterator.every(lambda value: value > 5) is True


def test_every_on_empty_remainder_is_true(iterator):
    iterator.collect()
    assert iterator.every(lambda value: False) is True


def test_every_stops_at_first_failure(iterator):
    seen = []

    def check(value):
        seen.append(value)
        return value < 4

    assert iterator.every(check) is False
    assert seen == [1, 5]
    assert iterator.position == 2


def test_every_leaves_no_stage(iterator):
    iterator.every(lambda value: value > 0)
    assert iterator.pipeline == ()


# ============================================================
# 4. skip / take
# ============================================================
def test_skip_first_three(iterator):
    iterator.skip(3)
    assert iterator.collect() == [9, 7]


def test_skip_more_than_length(iterator):
    iterator.skip(10)
    assert iterator.collect() == []


def test_take_first_three(iterator):
    iterator.take(3)
    assert iterator.collect() == [1, 5, 3]


def test_take_more_than_length(iterator):
    iterator.take(10)
    assert iterator.collect() == [1, 5, 3, 9, 7]


def test_skip_then_take(iterator):
    iterator.skip(3).take(1)
    assert iterator.collect() == [9]


def test_take_then_skip(iterator):
    iterator.take(3).skip(1)
    assert iterator.collect() == [5, 3]


def test_take_quota_does_not_recover_on_prev(iterator):
    iterator.take(2)
    assert iterator.next() == 1
    assert iterator.next() == 5
    assert iterator.prev() is NO_VALUE


def test_take_counts_only_elements_reaching_it(iterator):
    iterator.filter(lambda value: value > 4).take(2)
    assert iterator.collect() == [5, 9]


# ============================================================
# 5. tap
# ============================================================
def test_tap_side_effect_only(iterator, side_effects):
    iterator.tap(lambda value: side_effects.append(value)).collect()
    assert side_effects == [1, 5, 3, 9, 7]


def test_tap_with_other_stages(iterator, side_effects):
    (
        iterator
        .tap(lambda value: side_effects.append(value))
        .map(lambda value: value * 2)
        .tap(lambda value: side_effects.append(value))
        .collect()
    )
    assert side_effects == [1, 2, 5, 10, 3, 6, 9, 18, 7, 14]


def test_tap_after_filter_sees_only_survivors(iterator, side_effects):
    result = (
        iterator
        .filter(lambda value: value > 4)
        .tap(side_effects.append)
        .collect()
    )
    assert result == [5, 9, 7]
    assert side_effects == [5, 9, 7]


# ============================================================
# 6. 组合场景
# ============================================================
def test_map_filter_collect(iterator):
    iterator.map(lambda value: value * 2).filter(lambda value: value > 6)
    assert iterator.collect() == [10, 18, 14]


def test_next_prev_then_collect(iterator):
    iterator.map(lambda value: value ** 2).filter(lambda value: value > 10)
    iterator.next()
    iterator.next()
    iterator.prev()
    assert iterator.collect() == [81, 49]


def test_rewind_and_extend_pipeline(iterator):
    iterator.map(lambda value: value ** 2)
    iterator.filter(lambda value: value % 3 == 0)
    assert iterator.collect() == [9, 81]

    while iterator.has_prev():
        iterator.prev()

    iterator.map(lambda value: value * 2)
    assert iterator.find(lambda value: value > 10) == 18


def test_map_filter_map():
    it = Iter([1, 2, 8])
    it.map(lambda x: x + 1).filter(lambda x: x == 3).map(lambda x: x + 2)
    assert it.collect() == [5]


def test_collect_does_not_reset(iterator):
    iterator.map(lambda value: -value)
    assert iterator.collect() == [-1, -5, -3, -9, -7]
    assert iterator.collect() == []
    assert len(iterator.pipeline) == 1


# ============================================================
# 7. 非法参数：注册时立即失败
# ============================================================
@pytest.mark.parametrize("name", ["map", "filter", "tap", "some", "find", "every"])
def test_non_callable_rejected(iterator, name):
    with pytest.raises(InvalidArgumentError):
        getattr(iterator, name)(42)
    assert iterator.pipeline == ()
    assert iterator.position == 0


@pytest.mark.parametrize("name", ["skip", "take"])
@pytest.mark.parametrize("bad", [-1, 1.5, "3", True, None])
def test_bad_count_rejected(iterator, name, bad):
    with pytest.raises(InvalidArgumentError):
        getattr(iterator, name)(bad)
    assert iterator.pipeline == ()


def test_invalid_argument_is_value_error(iterator):
    with pytest.raises(ValueError):
        iterator.skip(-3)


def test_user_function_errors_propagate(iterator):
    def boom(value):
        raise KeyError(value)

    iterator.map(boom)
    with pytest.raises(KeyError):
        iterator.next()
    assert iterator.position == 1
