class InvalidRule(Exception):
    pass


class InvalidTemplate(InvalidRule):
    pass
