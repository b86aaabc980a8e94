"""
Main API configuration for Django Ninja Extra.
All API controllers are automatically registered here.
"""

import importlib
import inspect
import logging

from ninja_extra import NinjaExtraAPI

from capstone_tracker.core.api.base import BaseAPI

logger = logging.getLogger(__name__)

registered_controllers: set[type] = set()

api = NinjaExtraAPI(
    title="Capstone Tracker API",
    version="1.0.0",
    description="Capstone project lifecycle and defense scheduling",
    docs_url="/docs",
    openapi_url="/openapi.json",
)


def register_controllers_from_module(api_instance: NinjaExtraAPI, module_path: str) -> None:
    """
    Dynamically import and register API controllers from a module.

    Controllers must inherit from BaseAPI to be registered. A controller
    imported by several modules is registered once.
    """
    try:
        module = importlib.import_module(module_path)
    except ModuleNotFoundError:
        logger.debug("Module %s not found, skipping", module_path)
        return

    for attr_name in dir(module):
        attr = getattr(module, attr_name)
        if (
            inspect.isclass(attr)
            and issubclass(attr, BaseAPI)
            and attr is not BaseAPI
            and attr not in registered_controllers
        ):
            logger.debug("Registering controller: %s.%s", module_path, attr_name)
            api_instance.register_controllers(attr)
            registered_controllers.add(attr)


# Register controllers from each local app
LOCAL_APPS = [
    "capstone_tracker.faculty",
    "capstone_tracker.projects",
    "capstone_tracker.defenses",
]

for app in LOCAL_APPS:
    register_controllers_from_module(api, f"{app}.api")
