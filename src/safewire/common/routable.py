from __future__ import annotations

from typing import Iterable, List, Optional, Protocol, runtime_checkable

from safewire.common.name_type import NameType


@runtime_checkable
class Routable(Protocol):
    """What the routing layer needs from any value it stores or forwards.

    get_name(): where the value lives in the XOR address space
    get_owner(): who may mutate it, if anyone
    """

    def get_name(self) -> NameType: ...

    def get_owner(self) -> Optional[NameType]: ...


def closest(values: Iterable[Routable], target: NameType, *, count: int = 1) -> List[Routable]:
    """The `count` values whose names are XOR-closest to `target`, closest first."""
    return sorted(values, key=lambda v: v.get_name().distance(target))[: max(int(count), 0)]
