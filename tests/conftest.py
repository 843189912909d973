import pytest

from jsonmend.messages import Localizer
from jsonmend.repair import RepairOutcome
from jsonmend.types import Language


@pytest.fixture(params=["asyncio", "trio"])
def anyio_backend(request):
    return request.param


@pytest.fixture
def localizer() -> Localizer:
    return Localizer(Language.EN)


class StubRepairModule:
    def __init__(
        self,
        result: str | None = None,
        error: str | None = None,
        raises: Exception | None = None,
    ) -> None:
        self.result = result
        self.error = error
        self.raises = raises
        self.calls: list[tuple[str, str]] = []

    def repair(self, text: str) -> RepairOutcome:
        self.calls.append(("repair", text))
        return self._outcome()

    def must_repair(self, text: str) -> RepairOutcome:
        self.calls.append(("must_repair", text))
        return self._outcome()

    def _outcome(self) -> RepairOutcome:
        if self.raises is not None:
            raise self.raises
        if self.error is not None:
            return RepairOutcome(error=self.error)
        return RepairOutcome(result=self.result)


@pytest.fixture
def stub_repair_module():
    return StubRepairModule
