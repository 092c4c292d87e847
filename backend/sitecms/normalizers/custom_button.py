from sitecms.utils.timestamps import isoformat

def normalize_custom_button(button):
    return {
        "id": button["id"],
        "text": button["text"],
        "type": button["type"],
        "url": button["url"],
        "internalLink": button.get("internal_link"),
        "externalUrl": button.get("external_url"),
        "email": button.get("email"),
        "pageSlug": button["page_slug"],
        "style": button.get("style") or "primary",
        "size": button.get("size") or "default",
        "openInNewTab": button.get("open_in_new_tab", True),
        "createdAt": isoformat(button.get("created_at")),
    }
