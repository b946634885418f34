class InvalidSecret(ValueError):
    """
    The secret is not valid unpadded Base32, or decodes to an empty key.
    """
