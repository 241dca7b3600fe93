"""Example: use the service layer directly (without Flask).

Controllers are a thin layer; the business rules live in the services.
"""

import importlib

from config import get_settings_module

from src.school_portal.school_portal.access.model import Actor
from src.school_portal.school_portal.container import build_container
from src.school_portal.school_portal.core.enums import Role


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)
    superadmin = container.auth_service.authenticate(settings.SUPERADMIN_USERNAME, settings.SUPERADMIN_PASSWORD)
    actor = Actor(role=Role.SUPERADMIN, actor_id=superadmin.user_id)
    for school_class in container.class_service.list_classes(actor):
        print(school_class.to_dict())


if __name__ == "__main__":
    main()
