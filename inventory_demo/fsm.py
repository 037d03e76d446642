from __future__ import annotations

from statemachine import State, StateMachine

from inventory_demo.models import InventoryOrder


class InventoryOrderFSM(StateMachine):
    """Tracks which key the inventory is currently ordered by.

    Every reordering operation on the store fires exactly one event:
    - `sort_by_id` after a full ascending sort by id
    - `shuffle` after a random permutation
    - `sort_by_value` after quicksort
    - `regenerate` after a fresh item set replaces the old one
    """

    unordered = State(
        InventoryOrder.unordered.value,
        value=InventoryOrder.unordered.value,
        initial=True,
    )
    sorted_by_id = State(InventoryOrder.sorted_by_id.value, value=InventoryOrder.sorted_by_id.value)
    sorted_by_value = State(InventoryOrder.sorted_by_value.value, value=InventoryOrder.sorted_by_value.value)

    sort_by_id = unordered.to(sorted_by_id) | sorted_by_value.to(sorted_by_id) | sorted_by_id.to.itself()
    sort_by_value = unordered.to(sorted_by_value) | sorted_by_id.to(sorted_by_value) | sorted_by_value.to.itself()
    shuffle = sorted_by_id.to(unordered) | sorted_by_value.to(unordered) | unordered.to.itself()
    regenerate = sorted_by_id.to(unordered) | sorted_by_value.to(unordered) | unordered.to.itself()

    def __init__(self, order: InventoryOrder = InventoryOrder.unordered):
        super().__init__(start_value=order.value)

    @property
    def order(self) -> InventoryOrder:
        return InventoryOrder(str(self.current_state.value))
