"""Types de champs fournis de base. Importer ce module suffit à les enregistrer."""

from userfields.features.field_types.registry import FieldType


class TextField(FieldType):
    group = "standard"
    name = "Text"
    type = "text"
    icon = "dashicons-editor-textcolor"
    order = 1


class UsernameField(TextField):
    group = "default"
    name = "Username"
    type = "username"
    icon = "dashicons-editor-textcolor"
    order = 3
