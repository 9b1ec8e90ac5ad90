"""入力エラーの定義（すべて呼び出し側の入力ミスを表す）"""


class PrettyGraphsError(ValueError):
    """pretty_graphs が送出するエラーの基底クラス"""


class InvalidDataShape(PrettyGraphsError):
    """data が受け付け可能な形（ペア列 / 数値列 / マッピング）のどれでもない"""


class InvalidNumericValue(PrettyGraphsError):
    """値が数値でも数値として解釈できる文字列でもない"""


class InvalidOptionValue(PrettyGraphsError):
    """オプション値が構造的に使えない（属性ソースが解釈不能など）"""
