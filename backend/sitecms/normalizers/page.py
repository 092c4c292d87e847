from sitecms.utils.timestamps import isoformat

def normalize_page(page):
    return {
        "id": page["id"],
        "title": page["title"],
        "slug": page["slug"],
        "content": page["content"],
        "createdAt": isoformat(page.get("created_at")),
        "updatedAt": isoformat(page.get("updated_at")),
    }
