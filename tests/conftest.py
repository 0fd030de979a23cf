from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

import pytest

from signalgen.mappings import CxxMappings
from signalgen.models import CombinedIdent
from signalgen.naming import QObjectName
from tests._fixtures.bridge_builder import BridgeBuilder

MY_OBJECT_BRIDGE = """
qobjects:
  - ident: MyObject
    signals:
      - name: data_changed
        parameters:
          - {ident: trivial, type: i32}
          - {ident: opaque, type: "UniquePtr<QColor>"}
      - name: existing_signal
        cxx_name: baseName
        inherit: true
free_signals:
  - qobject: ObjRust
    name: signal_rust_name
mappings:
  cxx_names:
    ObjRust: ObjCpp
  namespaces:
    ObjRust: mynamespace
"""


@pytest.fixture(autouse=True)
def _reset_signalgen_logger() -> Iterator[None]:
    """Undo handlers installed by CLI runs so caplog keeps seeing records."""
    yield
    logger = logging.getLogger("signalgen")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def bridge_builder(tmp_path: Path) -> BridgeBuilder:
    """Provide a reusable bridge builder rooted at the pytest tmp_path."""
    return BridgeBuilder(tmp_path)


@pytest.fixture
def qobject_idents() -> QObjectName:
    return QObjectName(ident="MyObject", cpp_class=CombinedIdent(cpp="MyObject", rust="MyObject"))


@pytest.fixture
def mappings() -> CxxMappings:
    return CxxMappings()


@pytest.fixture
def my_object_bridge(bridge_builder: BridgeBuilder) -> Path:
    return bridge_builder.bridge(MY_OBJECT_BRIDGE)
