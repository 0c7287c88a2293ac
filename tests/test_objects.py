import pytest

from cgraph.objects import CFunctionType, CObject, DescInfo
from cgraph.status import CStatus


class _Worker(CObject):
    def __init__(self):
        self.runs = 0

    def run(self):
        self.runs += 1
        return CStatus()


def test_cobject_is_abstract():
    with pytest.raises(TypeError):
        CObject()


def test_lifecycle_defaults_are_ok():
    worker = _Worker()
    assert CObject.init(worker).is_ok()
    assert worker.run().is_ok()
    assert CObject.destroy(worker).is_ok()
    assert worker.runs == 1


def test_function_type_values():
    assert [t.value for t in CFunctionType] == [1, 2, 3]
    assert CFunctionType(2) is CFunctionType.RUN


def test_desc_info_defaults_empty():
    info = DescInfo()
    assert (info.name, info.session, info.description) == ("", "", "")


def test_desc_info_setters_chain():
    info = DescInfo()
    result = info.set_name("node").set_description("first stage")
    assert result is info
    assert info.name == "node"
    assert info.description == "first stage"
    assert info.session == ""