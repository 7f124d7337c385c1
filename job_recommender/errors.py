"""Exception types raised inside the recommender; none cross the public entry points."""


class JobRecommenderError(Exception):
    """Base class for recommender errors."""


class ExtractionError(JobRecommenderError):
    """A document parser could not produce text from the given bytes."""


class VocabularyError(JobRecommenderError):
    """A vocabulary resource is unreadable or malformed."""
