from pairdist.static import LEVEL_WARNING


def pl(x, singular, plural=None):
    if plural is None:
        plural = singular + "s"

    if isinstance(x, int):
        length = x
    else:
        length = len(x)
    return f"{singular if length == 1 else plural}"


def format_diagnostic(diagnostic):
    prefix = "Warning" if diagnostic.level == LEVEL_WARNING else "Error"
    return f"{prefix}: {diagnostic.message}"
