class ParseException(Exception):
    """Raised when a line of text is not a valid command"""
