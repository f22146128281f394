from acf_builder.models.validation_result import DefinitionCheck


class FieldDefinitionError(ValueError):
    """Raised by a strict build() when the field definition has issues."""

    def __init__(self, check: DefinitionCheck):
        self.check = check
        details = "; ".join(f"{i.attribute}: {i.message}" for i in check.issues)
        super().__init__(f"Invalid field definition ({check.issue_count} issue(s)): {details}")
