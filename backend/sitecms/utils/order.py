def sort_by_order(items, order_field="order"):
    """Ascending by rank; ties keep id order."""
    return sorted(items, key=lambda item: (item[order_field], item["id"]))


def reorder_ranks(items, ordered_ids, order_field="order"):
    """
    Compute new 1..N ranks for ``items``.

    Ids listed in ``ordered_ids`` come first, in that order; unknown ids are
    ignored and repeats keep their first position. Items not listed follow
    in their previous relative order. Returns {id: new_rank}.
    """
    by_id = {item["id"]: item for item in items}

    leading = []
    for item_id in ordered_ids:
        if item_id in by_id and item_id not in leading:
            leading.append(item_id)

    listed = set(leading)
    trailing = [item["id"] for item in sort_by_order(items, order_field) if item["id"] not in listed]

    return {item_id: rank for rank, item_id in enumerate(leading + trailing, start=1)}
