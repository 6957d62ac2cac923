"""
Use case for importing conversation history into the virtual filesystem.
"""

import logging
from typing import Optional

from chat_terminal.entities.conversation import CHAT_EXTENSION, ConversationRecord
from chat_terminal.ports.files.file_system_port import FileSystemPort
from chat_terminal.ports.history.history_source_port import HistorySourcePort

PROJECTS_DIR = "/projects"
UNSORTED_PROJECT = "unsorted"
IMPORT_FAILED_MESSAGE = (
    "Failed to import history. Make sure you're logged into ChatGPT "
    "and the extension has permissions."
)


class ImportHistoryUseCase:
    """Use case storing each fetched conversation as a ``.chat`` file."""

    def __init__(
        self,
        file_system: FileSystemPort,
        history_source: HistorySourcePort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            file_system: Filesystem receiving the conversation files
            history_source: Source of the conversation records
            logger: Logger instance to use for logging
        """
        self._file_system = file_system
        self._history_source = history_source
        self._logger = logger or logging.getLogger(__name__)

    @staticmethod
    def conversation_path(record: ConversationRecord, index: int) -> str:
        """
        Path of the file a record is stored in.

        Records land in ``/projects/<project>``, ``unsorted`` when they carry
        no project; the file is named after the title or, lacking one, the
        record's position.
        """
        project = (record.project or UNSORTED_PROJECT).replace("/", "-")
        title = (record.title or f"chat-{index}").replace("/", "-")
        return f"{PROJECTS_DIR}/{project}/{title}{CHAT_EXTENSION}"

    async def execute(self) -> str:
        """
        Fetch the history, write one file per conversation and persist the tree.

        Returns:
            Summary text for the terminal; failures are reported, not raised
        """
        try:
            history = await self._history_source.fetch_history()
            self._logger.info(f"Importing {len(history)} conversations")

            if not self._file_system.exists(PROJECTS_DIR):
                self._file_system.mkdir(PROJECTS_DIR)

            for index, record in enumerate(history):
                path = self.conversation_path(record, index)
                project_dir = path.rsplit("/", 1)[0]
                if not self._file_system.exists(project_dir):
                    self._file_system.mkdir(project_dir)
                self._file_system.write_file(path, record.to_chat_json())

            await self._file_system.save_to_storage()
            return f"Imported {len(history)} conversations"
        except Exception as e:
            self._logger.error(f"Failed to import history: {e}")
            return IMPORT_FAILED_MESSAGE

    async def handle_command(self, args: list[str]) -> str:
        """Command handler form of :meth:`execute`; arguments are ignored."""
        return await self.execute()
