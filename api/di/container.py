"""Centralized dependency injection container."""
from dependency_injector import containers, providers

from api.features.conversation.repository import COLLECTION as CONVERSATIONS
from api.features.conversation.repository import KEY_FIELD as CONVERSATION_KEY
from api.features.users.repository import COLLECTION as USERS
from api.features.users.repository import KEY_FIELD as USER_KEY
from core.settings import SETTINGS
from infra.document_store import InMemoryDocumentStore
from infra.groq_client import GroqCompletionClient
from infra.resources import MongoDocumentStore


class InfrastructureContainer(containers.DeclarativeContainer):
    """Infrastructure layer dependencies."""

    config = providers.Configuration()
    settings = providers.Object(SETTINGS)

    # Document store: one handle per process, shared by every repository
    document_store = providers.Selector(
        config.MONGODB.STORE_BACKEND,
        mongo=providers.Singleton(
            MongoDocumentStore,
            uri=SETTINGS.MONGODB.MONGODB_URI,
            database_name=SETTINGS.MONGODB.MONGODB_DB,
            timeout_ms=SETTINGS.MONGODB.MONGODB_TIMEOUT_MS,
            unique_keys={CONVERSATIONS: CONVERSATION_KEY, USERS: USER_KEY},
        ),
        memory=providers.Singleton(InMemoryDocumentStore),
    )

    # Groq
    groq_client = providers.Singleton(
        GroqCompletionClient,
        api_key=SETTINGS.GROQ.GROQ_API_KEY.get_secret_value(),
        base_url=SETTINGS.GROQ.GROQ_BASE_URL,
        model=SETTINGS.GROQ.GROQ_MODEL,
        timeout=SETTINGS.GROQ.GROQ_TIMEOUT_SECONDS,
    )


class ServiceContainer(containers.DeclarativeContainer):
    """Application services - depends on infrastructure."""

    infrastructure = providers.DependenciesContainer()

    # Repositories
    conversation_repository = providers.Factory(
        "api.features.conversation.repository.ConversationRepository",
        store=infrastructure.document_store,
    )

    user_repository = providers.Factory(
        "api.features.users.repository.UserRepository",
        store=infrastructure.document_store,
    )

    # Services
    conversation_service = providers.Factory(
        "api.features.conversation.service.ConversationService",
        repository=conversation_repository,
    )

    user_service = providers.Factory(
        "api.features.users.service.UserProfileService",
        repository=user_repository,
    )

    chat_service = providers.Factory(
        "api.features.chat.service.ChatCompletionService",
        completion_client=infrastructure.groq_client,
    )


class ControllerContainer(containers.DeclarativeContainer):
    """Controller-specific dependencies."""

    services = providers.DependenciesContainer()

    conversation_controller = providers.Factory(
        "api.features.conversation.controller.ConversationController",
        conversation_service=services.conversation_service,
    )

    user_controller = providers.Factory(
        "api.features.users.controller.UserController",
        user_service=services.user_service,
    )

    chat_controller = providers.Factory(
        "api.features.chat.controller.ChatController",
        chat_service=services.chat_service,
    )


class ApplicationContainer(containers.DeclarativeContainer):
    """Main application container composing all sub-containers."""

    wiring_config = containers.WiringConfiguration(
        modules=[
            "api.features.conversation.router",
            "api.features.users.router",
            "api.features.chat.router",
            "api.features.client_config.router",
        ]
    )

    infrastructure = providers.Container(InfrastructureContainer)
    services = providers.Container(ServiceContainer, infrastructure=infrastructure)
    controllers = providers.Container(ControllerContainer, services=services)
