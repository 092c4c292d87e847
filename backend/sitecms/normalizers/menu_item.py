def normalize_menu_item(item, target=None):
    data = {
        "id": item["id"],
        "text": item["text"],
        "order": item["order"],
        "type": item["type"],
        "internalLink": item.get("internal_link"),
        "externalUrl": item.get("external_url"),
    }

    if target is not None:
        data["href"] = target.href
        data["inApp"] = target.in_app

    return data


def normalize_navigation_entry(entry):
    target = entry["target"]
    data = normalize_menu_item(entry["item"], target)
    if target is None:
        data["href"] = None
        data["inApp"] = False
    return data
