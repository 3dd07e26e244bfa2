"""ファイルツリーのウォーク"""
from typing import Callable, Optional

from ..utils.file_utils import FileInfo, FileSystem, ROOT


WalkCallback = Callable[[str, Optional[FileInfo], Optional[BaseException]], None]


def walk(fs: FileSystem, callback: WalkCallback, root: str = ROOT):
    """root 以下の全エントリを名前順の先行順で 1 回ずつ callback に渡す

    エントリへのアクセスに失敗した場合は error 付きで callback を呼ぶ。
    callback が例外を送出した時点でウォークを中断し、その例外をそのまま伝える。
    """
    try:
        info = fs.stat(root)
    except OSError as e:
        callback(root, None, e)
        return

    _walk(fs, root, info, callback)


def _walk(fs: FileSystem, path: str, info: FileInfo, callback: WalkCallback):
    callback(path, info, None)

    if not info.is_dir:
        return

    try:
        entries = fs.list_dir(path)
    except OSError as e:
        # ディレクトリ自体は通知済み、一覧取得の失敗を改めて通知する
        callback(path, info, e)
        return

    for entry in entries:
        _walk(fs, entry.path, entry, callback)
