"""
Tests for the edge buffer.
"""

import pytest
import numpy as np

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from full_graphs import config
from full_graphs import edges as edges_module
from full_graphs.edges import EdgeBuffer
from full_graphs.errors import AllocationFailure, IndexOutOfRange, InvalidArgument


class TestCapacity:
    """Tests for reservation and growth."""

    def test_reserve_on_construction(self):
        buf = EdgeBuffer(8)

        assert buf.capacity == 8
        assert buf.size() == 0
        assert len(buf) == 0

    def test_reserve_never_shrinks(self):
        buf = EdgeBuffer(8)
        buf.reserve(2)
        assert buf.capacity == 8

    def test_reserve_keeps_content(self):
        buf = EdgeBuffer(2)
        buf.append_edge(3, 4)
        buf.reserve(10)

        assert buf.capacity == 10
        assert buf.to_array().tolist() == [3, 4]

    def test_negative_capacity(self):
        with pytest.raises(InvalidArgument):
            EdgeBuffer(-2)

    def test_numpy_memory_error(self, monkeypatch):
        buf = EdgeBuffer()
        cause = MemoryError("out of memory")

        def failing_empty(*args, **kwargs):
            raise cause

        monkeypatch.setattr(edges_module.np, "empty", failing_empty)

        with pytest.raises(AllocationFailure) as excinfo:
            buf.reserve(16)

        assert excinfo.value.requested == 16
        assert excinfo.value.__cause__ is cause

    def test_config_limit(self, monkeypatch, tmp_path):
        override = tmp_path / "config.yaml"
        override.write_text(
            "buffer:\n  dtype: int32\n  max_edge_values: 4\n", encoding="utf-8"
        )
        monkeypatch.delenv(config.MAX_EDGE_VALUES_ENV, raising=False)
        monkeypatch.setattr(config, "DEFAULT_CONFIG_PATH", override)

        buf = EdgeBuffer(4)
        assert buf.to_array().dtype == np.int32
        with pytest.raises(AllocationFailure) as excinfo:
            buf.reserve(100)
        assert excinfo.value.requested == 100

    def test_malformed_env_limit(self, monkeypatch):
        monkeypatch.setenv(config.MAX_EDGE_VALUES_ENV, "abc")
        with pytest.raises(InvalidArgument):
            EdgeBuffer(8)

    def test_capacity_over_limit(self, small_buffer_limit):
        buf = EdgeBuffer()
        with pytest.raises(AllocationFailure) as excinfo:
            buf.reserve(small_buffer_limit + 1)

        assert excinfo.value.requested == small_buffer_limit + 1
        assert isinstance(excinfo.value, MemoryError)

    def test_append_grows(self):
        buf = EdgeBuffer()
        for value in range(5):
            buf.append(value)

        assert buf.size() == 5
        assert buf.capacity >= 5
        assert buf.to_array().tolist() == [0, 1, 2, 3, 4]

    def test_growth_capped_at_limit(self, small_buffer_limit):
        buf = EdgeBuffer(6)
        for value in range(small_buffer_limit):
            buf.append(value)

        assert buf.capacity == small_buffer_limit
        with pytest.raises(AllocationFailure):
            buf.append(0)


class TestWrites:
    """Tests for appends and direct writes."""

    def test_append_row(self):
        buf = EdgeBuffer()
        buf.append_row(2, range(0, 3))

        assert buf.pairs().tolist() == [[2, 0], [2, 1], [2, 2]]

    def test_append_empty_row(self):
        buf = EdgeBuffer(4)
        buf.append_row(1, range(5, 5))
        assert buf.size() == 0

    def test_write_row_returns_next_offset(self):
        buf = EdgeBuffer(6)
        offset = buf.write_row(0, 1, range(1))
        offset = buf.write_row(offset, 2, range(2))

        assert offset == 6
        assert buf.to_array().tolist() == [1, 0, 2, 0, 2, 1]

    def test_write_row_outside_capacity(self):
        buf = EdgeBuffer(4)
        with pytest.raises(IndexOutOfRange):
            buf.write_row(2, 5, range(3))

    def test_setitem_and_getitem(self):
        buf = EdgeBuffer()
        buf.append_edge(0, 1)
        buf[1] = 7

        assert buf[1] == 7
        assert buf[-2] == 0

    def test_setitem_negative_index(self):
        buf = EdgeBuffer(8)
        buf.append_edge(0, 1)
        buf[-1] = 5

        assert buf.to_array().tolist() == [0, 5]

    def test_setitem_outside_size(self):
        buf = EdgeBuffer(4)
        buf.append(1)
        with pytest.raises(IndexOutOfRange):
            buf[1] = 2

    def test_view_is_read_only(self):
        buf = EdgeBuffer()
        buf.append_edge(0, 1)
        view = buf.view()

        with pytest.raises(ValueError):
            view[0] = 5

    def test_to_array_is_independent(self):
        buf = EdgeBuffer()
        buf.append_edge(0, 1)
        array = buf.to_array()
        buf.release()

        assert array.tolist() == [0, 1]
        assert array.dtype == np.int64


class TestLifetime:
    """Tests for release and scoped use."""

    def test_release_is_idempotent(self):
        buf = EdgeBuffer(4)
        buf.release()
        buf.release()
        assert buf.released

    def test_use_after_release(self):
        buf = EdgeBuffer(4)
        buf.release()

        with pytest.raises(InvalidArgument):
            buf.append(1)
        with pytest.raises(InvalidArgument):
            buf.size()
        with pytest.raises(InvalidArgument):
            buf[0] = 1

    def test_context_manager_releases(self):
        with EdgeBuffer(4) as buf:
            buf.append_edge(1, 2)
        assert buf.released

    def test_context_manager_releases_on_error(self):
        with pytest.raises(RuntimeError):
            with EdgeBuffer(4) as buf:
                raise RuntimeError("boom")
        assert buf.released

    def test_repr(self):
        buf = EdgeBuffer(4)
        buf.append(1)
        assert repr(buf) == "EdgeBuffer(size=1, capacity=4)"
        buf.release()
        assert repr(buf) == "EdgeBuffer(released)"
