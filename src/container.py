"""
Dependency injection container for managing application dependencies.
"""

import logging
from typing import Optional

from src.adapters.console.rich_renderer import RichConsoleRenderer
from src.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from src.adapters.prompt.console_prompt import ConsoleConflictPrompt
from src.adapters.state.text_session_store import TextFileSessionStore
from src.config.settings import Settings, settings as default_settings
from src.ports.files.file_repository_port import FileRepositoryPort
from src.ports.prompt.conflict_prompt_port import ConflictPromptPort
from src.ports.state.session_store_port import SessionStorePort
from src.use_cases.commands.grammar import CommandGrammar, default_commands
from src.use_cases.commands.handlers import FileManagerCommands
from src.use_cases.commands.interpreter import CommandInterpreter
from src.use_cases.files.file_info import FileInfoUseCase
from src.use_cases.files.file_operations import FileOperationEngine
from src.use_cases.files.list_directory import ListDirectoryUseCase
from src.use_cases.session.session_lifecycle import SessionLifecycle
from src.utils.paths import PathStyle, style_from_name


class DependencyContainer:
    """
    Container for managing application dependencies using dependency injection.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self._instances = {}
        self._settings = settings or default_settings
        self._logger = logging.getLogger(__name__)

    @property
    def settings(self) -> Settings:
        return self._settings

    def get_path_style(self) -> PathStyle:
        if "path_style" not in self._instances:
            self._instances["path_style"] = style_from_name(self._settings.path_style)
        return self._instances["path_style"]

    def get_renderer(self) -> RichConsoleRenderer:
        """
        Get console renderer instance.

        Returns:
            RichConsoleRenderer drawing the file manager windows
        """
        if "renderer" not in self._instances:
            self._instances["renderer"] = RichConsoleRenderer(
                self._settings.files_per_page, self._settings.border_symbol
            )
        return self._instances["renderer"]

    def get_file_repository(self) -> FileRepositoryPort:
        """
        Get file repository adapter instance.

        Returns:
            FileRepositoryPort implementation
        """
        if "file_repository" not in self._instances:
            self._instances["file_repository"] = LocalFileSystemAdapter(self._logger)
        return self._instances["file_repository"]

    def get_conflict_prompt(self) -> ConflictPromptPort:
        """
        Get conflict prompt adapter instance, sharing the renderer's console.

        Returns:
            ConflictPromptPort implementation
        """
        if "conflict_prompt" not in self._instances:
            self._instances["conflict_prompt"] = ConsoleConflictPrompt(
                self.get_renderer().console, self._logger
            )
        return self._instances["conflict_prompt"]

    def get_session_store(self) -> SessionStorePort:
        """
        Get session store adapter instance.

        Returns:
            SessionStorePort implementation
        """
        if "session_store" not in self._instances:
            self._instances["session_store"] = TextFileSessionStore(
                self._settings.state_file, self._logger
            )
        return self._instances["session_store"]

    def get_file_operation_engine(self) -> FileOperationEngine:
        if "file_operation_engine" not in self._instances:
            self._instances["file_operation_engine"] = FileOperationEngine(
                self.get_file_repository(), self.get_conflict_prompt(), self._logger
            )
        return self._instances["file_operation_engine"]

    def get_file_info_use_case(self) -> FileInfoUseCase:
        if "file_info_use_case" not in self._instances:
            self._instances["file_info_use_case"] = FileInfoUseCase(
                self.get_file_repository(), self.get_path_style(), self._logger
            )
        return self._instances["file_info_use_case"]

    def get_list_directory_use_case(self) -> ListDirectoryUseCase:
        """
        Get list directory use case with injected dependencies.

        Returns:
            Configured ListDirectoryUseCase
        """
        if "list_directory_use_case" not in self._instances:
            self._instances["list_directory_use_case"] = ListDirectoryUseCase(
                self.get_file_repository(), self._settings.files_per_page, self._logger
            )
        return self._instances["list_directory_use_case"]

    def get_session_lifecycle(self) -> SessionLifecycle:
        if "session_lifecycle" not in self._instances:
            self._instances["session_lifecycle"] = SessionLifecycle(
                self.get_session_store(),
                self.get_file_repository(),
                self._settings.default_page,
                self._logger,
            )
        return self._instances["session_lifecycle"]

    def get_file_manager_commands(self) -> FileManagerCommands:
        if "file_manager_commands" not in self._instances:
            self._instances["file_manager_commands"] = FileManagerCommands(
                self.get_file_repository(),
                self.get_file_operation_engine(),
                self.get_file_info_use_case(),
                default_page=self._settings.default_page,
                style=self.get_path_style(),
                logger=self._logger,
            )
        return self._instances["file_manager_commands"]

    def get_command_interpreter(self) -> CommandInterpreter:
        """
        Get command interpreter wired to the command table and its handlers.

        Returns:
            Configured CommandInterpreter
        """
        if "command_interpreter" not in self._instances:
            grammar = CommandGrammar(
                default_commands(), self.get_path_style(), self._logger
            )
            self._instances["command_interpreter"] = CommandInterpreter(
                grammar, self.get_file_manager_commands().handlers(), self._logger
            )
        return self._instances["command_interpreter"]

    def reset(self):
        """Reset all instances (useful for testing)."""
        self._instances.clear()


# Global container instance
container = DependencyContainer()
