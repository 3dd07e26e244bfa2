"""アップロード処理のエラー定義"""


class UploaderError(Exception):
    """アップローダーの基底エラー"""


class MissingCredentialsError(UploaderError):
    """認証情報が設定されていない"""


class PathError(UploaderError):
    """パス付きのエラー

    どのファイルで失敗したかを呼び出し元まで残すため、パスと原因を保持する。
    """

    message = "error at"

    def __init__(self, path: str, cause: BaseException):
        self.path = path
        self.cause = cause
        super().__init__(self.format_message())

    def format_message(self) -> str:
        return f"{self.message} {self.path}: {self.cause}"


class WalkAccessError(PathError):
    """ウォーク中にエントリへアクセスできなかった"""

    message = "could not walk"


class OpenError(PathError):
    """ファイルを開けなかった"""

    def format_message(self) -> str:
        return f"could not open {self.path} for reading: {self.cause}"


class UploadError(PathError):
    """アップロードに失敗した"""

    message = "failed to upload"
