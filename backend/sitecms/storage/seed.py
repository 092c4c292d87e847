# sitecms/storage/seed.py
"""Default content a fresh site starts with."""

DEFAULT_PAGES = [
    {
        "title": "Início",
        "slug": "home",
        "content": (
            '<h1 class="text-3xl font-bold mb-6">Bem-vindo ao Meu Site</h1>'
            '<p class="mb-4">Este é um site personalizado com um sistema de '
            "gerenciamento de conteúdo integrado.</p>"
        ),
    },
    {
        "title": "Serviços",
        "slug": "servicos",
        "content": (
            '<h1 class="text-3xl font-bold mb-6">Nossos Serviços</h1>'
            '<p class="mb-4">Conheça os serviços que oferecemos.</p>'
        ),
    },
    {
        "title": "Site",
        "slug": "site",
        "content": (
            '<h1 class="text-3xl font-bold mb-6">Sobre o Site</h1>'
            '<p class="mb-4">Na área administrativa é possível criar páginas, '
            "gerenciar o menu de navegação e editar o conteúdo existente.</p>"
        ),
    },
]

DEFAULT_MENU_ITEMS = [
    {"text": "Início", "type": "internal", "internal_link": "home", "external_url": None},
    {"text": "Serviços", "type": "internal", "internal_link": "servicos", "external_url": None},
    {"text": "Site", "type": "internal", "internal_link": "site", "external_url": None},
    {"text": "Alex", "type": "internal", "internal_link": "alex", "external_url": None},
]


def seed_default_content(store):
    """
    Insert the default pages and menu.

    Idempotent: pages are skipped when their slug exists, the menu only when
    it is completely empty. Returns the number of rows created.
    """
    created = 0

    for page in DEFAULT_PAGES:
        if store.pages.get_by_unique_key(page["slug"]) is None:
            store.pages.create(page)
            created += 1

    if store.menu_items.count() == 0:
        for order, item in enumerate(DEFAULT_MENU_ITEMS, start=1):
            store.menu_items.create({**item, "order": order})
            created += 1

    return created
