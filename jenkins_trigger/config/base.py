from typing import Any

from pydantic import BaseModel


class BaseTriggerModel(BaseModel):
    def get_sensitive_fields_data(self) -> set[str]:
        return _get_sensitive_information(self)


def _is_sensitive(extra: Any) -> bool:
    return isinstance(extra, dict) and bool(extra.get("sensitive", False))


def _get_sensitive_information(model: BaseTriggerModel) -> set[str]:
    """
    Collects the values of every field marked with `json_schema_extra={"sensitive": True}`,
    walking into nested models, lists and dicts of models
    """
    fields = type(model).model_fields
    sensitive_set = {
        str(getattr(model, field_name))
        for field_name, field in fields.items()
        if _is_sensitive(field.json_schema_extra)
        and getattr(model, field_name) is not None
    }

    for field_name in fields:
        value = getattr(model, field_name)
        children: list[Any]
        if isinstance(value, dict):
            children = list(value.values())
        elif isinstance(value, list):
            children = value
        else:
            children = [value]
        for child in children:
            if isinstance(child, BaseTriggerModel):
                sensitive_set.update(child.get_sensitive_fields_data())

    return sensitive_set
