"""Tests for error log port interface."""
import pytest
from errorlog.core.ports.error_log import ErrorLogPort


class TestErrorLogPortInterface:
    def test_cannot_instantiate_abstract_port(self):
        with pytest.raises(TypeError):
            ErrorLogPort()

    def test_partial_implementation_cannot_instantiate(self):
        class WriteOnly(ErrorLogPort):
            @property
            def name(self):
                return "Write Only"

            async def log(self, error):
                return "id"

        with pytest.raises(TypeError):
            WriteOnly()

    @pytest.mark.asyncio
    async def test_concrete_implementation_works(self):
        class MemoryErrorLog(ErrorLogPort):
            def __init__(self):
                self._data = {}

            @property
            def name(self):
                return "Memory Error Log"

            async def log(self, error):
                error_id = str(len(self._data))
                self._data[error_id] = error
                return error_id

            async def get_error(self, error_id):
                return self._data[error_id]

            async def get_errors(self, page_index, page_size):
                return list(self._data.values()), len(self._data)

        log = MemoryErrorLog()
        error_id = await log.log("boom")
        assert await log.get_error(error_id) == "boom"
        assert await log.get_errors(0, 10) == (["boom"], 1)
        assert log.name == "Memory Error Log"
