"""
Use case initializing the filesystem of a new terminal session.
"""

import logging
from typing import Optional

from chat_terminal.entities.conversation import ChatMessage, Conversation
from chat_terminal.ports.files.file_system_port import FileSystemPort
from chat_terminal.use_cases.history.import_history import PROJECTS_DIR

LOADED = "loaded"
CREATED = "created"
SEEDED = "seeded"

DEMO_CONVERSATIONS: dict[str, Conversation] = {
    f"{PROJECTS_DIR}/web-development/nextjs-app.chat": Conversation(
        title="Next.js Application",
        messages=[
            ChatMessage(role="user", content="How do I create a Next.js app?"),
            ChatMessage(
                role="assistant",
                content="You can use create-next-app to start a new Next.js project...",
            ),
        ],
    ),
    f"{PROJECTS_DIR}/ai-research/llm-models.chat": Conversation(
        title="LLM Models Discussion",
        messages=[
            ChatMessage(role="user", content="What are the latest LLM models?"),
            ChatMessage(
                role="assistant",
                content="The latest models include GPT-4o, Claude 3, and...",
            ),
        ],
    ),
}


class SessionBootstrapUseCase:
    """Load the saved tree, or fall back to a default one."""

    def __init__(
        self,
        file_system: FileSystemPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_system = file_system
        self._logger = logger or logging.getLogger(__name__)

    async def execute(self) -> str:
        """
        Initialize the filesystem.

        Returns:
            "loaded" when the saved tree was restored, "created" when nothing was
            saved and the default layout was created, "seeded" when loading
            failed and the demo data was written and saved
        """
        try:
            loaded = await self._file_system.load_from_storage()
        except Exception as e:
            self._logger.warning(f"Failed to load from storage, seeding demo data: {e}")
            await self.seed_demo_data()
            return SEEDED

        if loaded:
            return LOADED

        if not self._file_system.exists(PROJECTS_DIR):
            self._file_system.mkdir(PROJECTS_DIR)
        return CREATED

    async def seed_demo_data(self) -> None:
        """Write the demo projects and conversations, then save."""
        if not self._file_system.exists(PROJECTS_DIR):
            self._file_system.mkdir(PROJECTS_DIR)
        for path, conversation in DEMO_CONVERSATIONS.items():
            project_dir = path.rsplit("/", 1)[0]
            if not self._file_system.exists(project_dir):
                self._file_system.mkdir(project_dir)
            self._file_system.write_file(
                path, conversation.model_dump_json(exclude_none=True)
            )
        await self._file_system.save_to_storage()
