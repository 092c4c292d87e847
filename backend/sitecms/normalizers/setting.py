def normalize_setting(setting):
    return {
        "id": setting["id"],
        "name": setting["name"],
        "value": setting["value"],
    }
