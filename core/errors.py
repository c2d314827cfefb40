class AcquisitionFailure(Exception):
    """The offer page for a category could not be downloaded or parsed."""

    def __init__(self, category, reason):
        self.category = category
        self.reason = reason
        super().__init__(f"{category}: {reason}")


class ExtractionEmpty(Exception):
    """Every selector strategy came back without a single offer."""

    def __init__(self, category):
        self.category = category
        super().__init__(f"No offers extracted for {category}")
