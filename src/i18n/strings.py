"""
Built-in Translation Strings for LocaleKit.

Every common UI slot (see CommonKey) is translated for every supported
locale, so the translator always has a built-in answer before falling back
to the raw key.

Structure: {locale: {dotted_key: text}}
"""

from __future__ import annotations

from src.i18n.constants import CommonKey

# Translation strings organized by locale -> dotted key
TRANSLATIONS: dict[str, dict[str, str]] = {
    "en": {
        # Buttons
        CommonKey.SAVE: "Save",
        CommonKey.CANCEL: "Cancel",
        CommonKey.DELETE: "Delete",
        CommonKey.EDIT: "Edit",
        CommonKey.ADD: "Add",
        CommonKey.REMOVE: "Remove",
        # Status
        CommonKey.LOADING: "Loading...",
        CommonKey.ERROR: "Error",
        CommonKey.SUCCESS: "Success",
        CommonKey.WARNING: "Warning",
        # UI
        CommonKey.SETTINGS: "Settings",
        CommonKey.ADVANCED: "Advanced",
        CommonKey.ENABLED: "Enabled",
        CommonKey.DISABLED: "Disabled",
        # Actions
        CommonKey.CONFIRM: "Confirm",
        CommonKey.CLEAR: "Clear",
        CommonKey.RESET: "Reset",
    },
    "zh-CN": {
        CommonKey.SAVE: "保存",
        CommonKey.CANCEL: "取消",
        CommonKey.DELETE: "删除",
        CommonKey.EDIT: "编辑",
        CommonKey.ADD: "添加",
        CommonKey.REMOVE: "移除",
        CommonKey.LOADING: "加载中...",
        CommonKey.ERROR: "错误",
        CommonKey.SUCCESS: "成功",
        CommonKey.WARNING: "警告",
        CommonKey.SETTINGS: "设置",
        CommonKey.ADVANCED: "高级",
        CommonKey.ENABLED: "已启用",
        CommonKey.DISABLED: "已禁用",
        CommonKey.CONFIRM: "确认",
        CommonKey.CLEAR: "清除",
        CommonKey.RESET: "重置",
    },
    "zh-TW": {
        CommonKey.SAVE: "儲存",
        CommonKey.CANCEL: "取消",
        CommonKey.DELETE: "刪除",
        CommonKey.EDIT: "編輯",
        CommonKey.ADD: "新增",
        CommonKey.REMOVE: "移除",
        CommonKey.LOADING: "載入中...",
        CommonKey.ERROR: "錯誤",
        CommonKey.SUCCESS: "成功",
        CommonKey.WARNING: "警告",
        CommonKey.SETTINGS: "設定",
        CommonKey.ADVANCED: "進階",
        CommonKey.ENABLED: "已啟用",
        CommonKey.DISABLED: "已停用",
        CommonKey.CONFIRM: "確認",
        CommonKey.CLEAR: "清除",
        CommonKey.RESET: "重設",
    },
    "ja": {
        CommonKey.SAVE: "保存",
        CommonKey.CANCEL: "キャンセル",
        CommonKey.DELETE: "削除",
        CommonKey.EDIT: "編集",
        CommonKey.ADD: "追加",
        CommonKey.REMOVE: "除去",
        CommonKey.LOADING: "読み込み中...",
        CommonKey.ERROR: "エラー",
        CommonKey.SUCCESS: "成功",
        CommonKey.WARNING: "警告",
        CommonKey.SETTINGS: "設定",
        CommonKey.ADVANCED: "詳細設定",
        CommonKey.ENABLED: "有効",
        CommonKey.DISABLED: "無効",
        CommonKey.CONFIRM: "確認",
        CommonKey.CLEAR: "クリア",
        CommonKey.RESET: "リセット",
    },
    "ko": {
        CommonKey.SAVE: "저장",
        CommonKey.CANCEL: "취소",
        CommonKey.DELETE: "삭제",
        CommonKey.EDIT: "편집",
        CommonKey.ADD: "추가",
        CommonKey.REMOVE: "제거",
        CommonKey.LOADING: "불러오는 중...",
        CommonKey.ERROR: "오류",
        CommonKey.SUCCESS: "성공",
        CommonKey.WARNING: "경고",
        CommonKey.SETTINGS: "설정",
        CommonKey.ADVANCED: "고급",
        CommonKey.ENABLED: "활성화됨",
        CommonKey.DISABLED: "비활성화됨",
        CommonKey.CONFIRM: "확인",
        CommonKey.CLEAR: "지우기",
        CommonKey.RESET: "초기화",
    },
    "de": {
        CommonKey.SAVE: "Speichern",
        CommonKey.CANCEL: "Abbrechen",
        CommonKey.DELETE: "Löschen",
        CommonKey.EDIT: "Bearbeiten",
        CommonKey.ADD: "Hinzufügen",
        CommonKey.REMOVE: "Entfernen",
        CommonKey.LOADING: "Wird geladen...",
        CommonKey.ERROR: "Fehler",
        CommonKey.SUCCESS: "Erfolg",
        CommonKey.WARNING: "Warnung",
        CommonKey.SETTINGS: "Einstellungen",
        CommonKey.ADVANCED: "Erweitert",
        CommonKey.ENABLED: "Aktiviert",
        CommonKey.DISABLED: "Deaktiviert",
        CommonKey.CONFIRM: "Bestätigen",
        CommonKey.CLEAR: "Leeren",
        CommonKey.RESET: "Zurücksetzen",
    },
    "fr": {
        CommonKey.SAVE: "Enregistrer",
        CommonKey.CANCEL: "Annuler",
        CommonKey.DELETE: "Supprimer",
        CommonKey.EDIT: "Modifier",
        CommonKey.ADD: "Ajouter",
        CommonKey.REMOVE: "Retirer",
        CommonKey.LOADING: "Chargement...",
        CommonKey.ERROR: "Erreur",
        CommonKey.SUCCESS: "Succès",
        CommonKey.WARNING: "Avertissement",
        CommonKey.SETTINGS: "Paramètres",
        CommonKey.ADVANCED: "Avancé",
        CommonKey.ENABLED: "Activé",
        CommonKey.DISABLED: "Désactivé",
        CommonKey.CONFIRM: "Confirmer",
        CommonKey.CLEAR: "Effacer",
        CommonKey.RESET: "Réinitialiser",
    },
    "es": {
        CommonKey.SAVE: "Guardar",
        CommonKey.CANCEL: "Cancelar",
        CommonKey.DELETE: "Eliminar",
        CommonKey.EDIT: "Editar",
        CommonKey.ADD: "Añadir",
        CommonKey.REMOVE: "Quitar",
        CommonKey.LOADING: "Cargando...",
        CommonKey.ERROR: "Error",
        CommonKey.SUCCESS: "Éxito",
        CommonKey.WARNING: "Advertencia",
        CommonKey.SETTINGS: "Configuración",
        CommonKey.ADVANCED: "Avanzado",
        CommonKey.ENABLED: "Activado",
        CommonKey.DISABLED: "Desactivado",
        CommonKey.CONFIRM: "Confirmar",
        CommonKey.CLEAR: "Limpiar",
        CommonKey.RESET: "Restablecer",
    },
    "ru": {
        CommonKey.SAVE: "Сохранить",
        CommonKey.CANCEL: "Отмена",
        CommonKey.DELETE: "Удалить",
        CommonKey.EDIT: "Редактировать",
        CommonKey.ADD: "Добавить",
        CommonKey.REMOVE: "Убрать",
        CommonKey.LOADING: "Загрузка...",
        CommonKey.ERROR: "Ошибка",
        CommonKey.SUCCESS: "Успешно",
        CommonKey.WARNING: "Предупреждение",
        CommonKey.SETTINGS: "Настройки",
        CommonKey.ADVANCED: "Дополнительно",
        CommonKey.ENABLED: "Включено",
        CommonKey.DISABLED: "Отключено",
        CommonKey.CONFIRM: "Подтвердить",
        CommonKey.CLEAR: "Очистить",
        CommonKey.RESET: "Сбросить",
    },
    "pt": {
        CommonKey.SAVE: "Salvar",
        CommonKey.CANCEL: "Cancelar",
        CommonKey.DELETE: "Excluir",
        CommonKey.EDIT: "Editar",
        CommonKey.ADD: "Adicionar",
        CommonKey.REMOVE: "Remover",
        CommonKey.LOADING: "Carregando...",
        CommonKey.ERROR: "Erro",
        CommonKey.SUCCESS: "Sucesso",
        CommonKey.WARNING: "Aviso",
        CommonKey.SETTINGS: "Configurações",
        CommonKey.ADVANCED: "Avançado",
        CommonKey.ENABLED: "Ativado",
        CommonKey.DISABLED: "Desativado",
        CommonKey.CONFIRM: "Confirmar",
        CommonKey.CLEAR: "Limpar",
        CommonKey.RESET: "Redefinir",
    },
}


def lookup(locale: str, key: str) -> str | None:
    """
    Get a built-in translation without any fallback.

    Args:
        locale: Locale code
        key: Dotted translation key (e.g. "common.save")

    Returns:
        The translated string, or None if this locale has no entry for the key
    """
    return TRANSLATIONS.get(locale, {}).get(key)


def get_translation_keys(locale: str) -> list[str]:
    """
    Get all built-in translation keys for a locale.

    Args:
        locale: Locale code

    Returns:
        List of dotted keys (empty for unknown locales)
    """
    return [str(key) for key in TRANSLATIONS.get(locale, {})]
