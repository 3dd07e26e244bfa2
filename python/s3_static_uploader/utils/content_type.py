"""拡張子からの Content-Type 推定"""
import mimetypes
import posixpath


TEXT_CHARSET = "charset=utf-8"

# Web 配信でよく使う拡張子はここで固定する
BUILTIN_TYPES = {
    ".avif": "image/avif",
    ".css": "text/css; charset=utf-8",
    ".gif": "image/gif",
    ".htm": "text/html; charset=utf-8",
    ".html": "text/html; charset=utf-8",
    ".jpeg": "image/jpeg",
    ".jpg": "image/jpeg",
    ".js": "application/javascript",
    ".json": "application/json",
    ".mjs": "application/javascript",
    ".pdf": "application/pdf",
    ".png": "image/png",
    ".svg": "image/svg+xml",
    ".wasm": "application/wasm",
    ".webp": "image/webp",
    ".xml": "text/xml; charset=utf-8",
}

# システムの mime.types は読まず、Python 標準の既定表だけを使う
_mime_types = mimetypes.MimeTypes()


def file_extension(path: str) -> str:
    """最後のパス要素の最後の "." から末尾まで（なければ空文字）"""
    name = posixpath.basename(path)
    index = name.rfind(".")
    if index < 0:
        return ""
    return name[index:]


def _lookup(extension: str) -> str:
    content_type = BUILTIN_TYPES.get(extension)
    if content_type:
        return content_type
    return _mime_types.types_map[True].get(extension, "")


def content_type_for(path: str) -> str:
    """パスの拡張子に対応する Content-Type を返す（不明なら空文字）"""
    extension = file_extension(path)
    if not extension:
        return ""

    content_type = _lookup(extension) or _lookup(extension.lower())
    if content_type.startswith("text/") and "charset=" not in content_type:
        content_type = f"{content_type}; {TEXT_CHARSET}"
    return content_type
