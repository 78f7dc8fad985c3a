"""
Handlers of the file manager commands.
"""

import logging
from typing import Callable, Optional

from src.entities.Command import ParsedArguments
from src.entities.Notification import Notification
from src.entities.Operation import ItemOutcome, OperationOutcome
from src.entities.Session import SessionState
from src.exceptions import AccessDeniedError, FileRepositoryError
from src.ports.files.file_repository_port import FileRepositoryPort
from src.use_cases.files.file_info import FileInfoUseCase
from src.use_cases.files.file_operations import FileOperationEngine, copy_file_name
from src.utils.paths import PathStyle, base_name, host_style, is_root, is_within, join, parent, resolve

Handler = Callable[[SessionState, ParsedArguments], None]

UNRESOLVED_PATH = "The specified path can not be used. Specify an absolute path."
MISSING_ENTRY = "The command failed: the specified file or directory does not exist."


class FileManagerCommands:
    """
    The commands of the file manager.

    Every handler validates its arguments first and only then changes the
    session, so a rejected command leaves everything but the notification as
    it was.
    """

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        engine: FileOperationEngine,
        file_info: FileInfoUseCase,
        default_page: int = 1,
        style: Optional[PathStyle] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the commands.

        Args:
            file_repository: Repository for file operations
            engine: Engine copying and deleting files and trees
            file_info: Use case describing entries for 'info'
            default_page: Page shown when none is requested
            style: Path style of typed paths
            logger: Logger instance to use for logging
        """
        self._file_repository = file_repository
        self._engine = engine
        self._file_info = file_info
        self._default_page = default_page
        self._style = style or host_style()
        self._logger = logger or logging.getLogger(__name__)

    def handlers(self) -> dict[str, Handler]:
        """Map command names to their handlers."""
        return {
            "gotd": self.go_to_directory,
            "cpy": self.copy,
            "del": self.delete,
            "info": self.file_info,
            "exit": self.exit,
        }

    def _resolve(self, raw: Optional[str], session: SessionState) -> Optional[str]:
        return resolve(raw or "", session.current_directory, self._style)

    # ------------------------- gotd -------------------------
    def go_to_directory(self, session: SessionState, args: ParsedArguments) -> None:
        path_arg, page_arg = args[0], args.option("p")

        path = self._resolve(path_arg, session)
        if not path:
            session.notify(
                Notification.error(
                    "Can not go to the specified path. Specify an absolute path."
                )
            )
            return

        if not self._file_repository.is_directory(path):
            session.notify(
                Notification.error("The command failed: the specified directory does not exist.")
            )
            return

        page = self._default_page if page_arg is None else int(page_arg)
        if page == 0:
            page = self._default_page

        self._logger.info(f"Going to {path} (page {page})")
        session.navigate(path, page, Notification.empty())

    # ------------------------- cpy -------------------------
    def copy(self, session: SessionState, args: ParsedArguments) -> None:
        source_arg, destination_arg = args[0], args[1]
        replace_arg = args.option("rf")

        source = self._resolve(source_arg, session)
        destination = self._resolve(destination_arg, session)
        if not source or not destination:
            session.notify(Notification.error(UNRESOLVED_PATH))
            return

        if not self._file_repository.exists(source):
            session.notify(Notification.error(MISSING_ENTRY))
            return

        if not self._file_repository.is_directory(destination):
            session.notify(
                Notification.error(
                    "The command failed: the destination folder does not exist "
                    "or the path points to a file."
                )
            )
            return

        if is_root(source, self._style):
            session.notify(Notification.error("A whole drive can not be copied."))
            return

        replace = replace_arg == "true"
        name = base_name(source, self._style)
        target = join(destination, name, self._style)

        if self._file_repository.is_file(source):
            self._copy_file(session, source, destination, target, replace_arg)
            return

        if is_within(destination, source, self._style) or is_within(target, source, self._style):
            session.notify(
                Notification.error("A folder can not be copied into itself or its subfolders.")
            )
            return

        self._logger.info(f"Copying directory {source} to {target}")
        if not self._file_repository.exists(target):
            self._file_repository.make_directory(target)
        outcome = self._engine.copy_tree(source, target, replace_by_default=replace)

        if outcome is OperationOutcome.COMPLETED:
            session.notify(Notification.info(f"The folder {name} was copied to {destination}."))
        else:
            session.notify(
                Notification.warning(
                    f"Copying of the folder {name} was aborted. Already copied files were kept."
                )
            )

    def _copy_file(
        self,
        session: SessionState,
        source: str,
        destination: str,
        target: str,
        replace_arg: Optional[str],
    ) -> None:
        name = base_name(source, self._style)
        # with -rf false the copy gets a free name, so a folder in the way does not matter
        if (
            replace_arg != "false"
            and self._file_repository.is_directory(target)
            and not self._file_repository.is_link(target)
        ):
            session.notify(
                Notification.error(
                    f"The destination folder already contains a folder named {name}, "
                    "so the file can not be copied there."
                )
            )
            return
        if self._file_repository.exists(target):
            if replace_arg is None:
                session.notify(
                    Notification.info(
                        f"The destination folder already contains a file named {name}.\n"
                        "To replace the file in the destination folder, repeat the command "
                        "with the replace argument set to true:\n"
                        f'cpy "{source}" "{destination}" -rf true\n'
                        "To create one more copy of the file in the destination folder, "
                        "repeat the command with the replace argument set to false:\n"
                        f'cpy "{source}" "{destination}" -rf false'
                    )
                )
                return
            if replace_arg == "false":
                target = join(
                    destination,
                    copy_file_name(destination, name, self._file_repository.exists),
                    self._style,
                )

        self._logger.info(f"Copying file {source} to {target}")
        outcome = self._engine.copy_file(source, target)
        if outcome is ItemOutcome.DONE:
            session.notify(
                Notification.info(f"The file {name} was copied to {destination}.")
            )
        else:
            session.notify(Notification.warning(f"The file {name} was not copied."))

    # ------------------------- del -------------------------
    def delete(self, session: SessionState, args: ParsedArguments) -> None:
        path_arg, recursive_arg = args[0], args.option("r")

        path = self._resolve(path_arg, session)
        if not path:
            session.notify(Notification.error(UNRESOLVED_PATH))
            return

        if not self._file_repository.exists(path):
            session.notify(Notification.error(MISSING_ENTRY))
            return

        if is_root(path, self._style):
            session.notify(Notification.error("A whole drive can not be deleted."))
            return

        name = base_name(path, self._style)
        if self._file_repository.is_file(path):
            try:
                outcome = self._engine.delete_file(path)
            except AccessDeniedError as e:
                session.notify(
                    Notification.error(f"An error occurred while deleting the file: {e}")
                )
                return
            if outcome is ItemOutcome.DONE:
                session.notify(Notification.info(f"The file {name} was deleted."))
            else:
                session.notify(Notification.warning(f"The file {name} was not deleted."))
            return

        listing = self._file_repository.list_directory(path)
        if not listing.is_empty and recursive_arg is None:
            session.notify(
                Notification.info(
                    "The specified directory is not empty. To delete the folder with all "
                    "of its content, repeat the command with the recursive deletion argument:\n"
                    f'del "{path}" -r true'
                )
            )
            return

        self._logger.info(f"Deleting directory {path}")
        if not listing.is_empty:
            if self._engine.delete_tree(path) is OperationOutcome.ABORTED:
                session.notify(
                    Notification.warning(
                        f"Deletion of the folder {name} was aborted. "
                        "Already deleted files stay deleted."
                    )
                )
                return
            if not self._file_repository.list_directory(path).is_empty:
                session.notify(
                    Notification.warning(
                        f"Some items were skipped, so the folder {name} was kept."
                    )
                )
                return

        outcome = self._engine.remove_directory(path)
        if outcome is not ItemOutcome.DONE:
            session.notify(Notification.warning(f"The folder {name} was not deleted."))
            return

        notification = Notification.info(f"The folder {name} was deleted.")
        current = session.current_directory
        if current is not None and is_within(current, path, self._style):
            session.navigate(parent(path, self._style), self._default_page, notification)
        else:
            session.notify(notification)

    # ------------------------- info -------------------------
    def file_info(self, session: SessionState, args: ParsedArguments) -> None:
        path = self._resolve(args[0], session)
        if not path:
            session.notify(Notification.error(UNRESOLVED_PATH))
            return

        if not self._file_repository.exists(path):
            session.notify(Notification.error(MISSING_ENTRY))
            return

        try:
            description = self._file_info.execute(path)
        except FileRepositoryError as e:
            session.notify(
                Notification.error(f"An error occurred while getting information: {e}")
            )
            return
        session.notify(Notification.info(description))

    # ------------------------- exit -------------------------
    def exit(self, session: SessionState, args: ParsedArguments) -> None:
        self._logger.info("Exit requested")
        session.request_exit()
