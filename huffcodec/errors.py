class HuffmanError(ValueError):
    pass


class InvalidInputError(HuffmanError):
    # text can't produce a codable tree (fewer than two distinct symbols)
    pass


class MalformedInputError(HuffmanError):
    # bad shape/leaf/bit sequences, or a symbol the tree can't encode
    pass
