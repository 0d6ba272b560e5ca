"""
Error types raised while importing a paper
"""


class PaperImportError(Exception):
    """Base class for every failure surfaced to the user"""


class InvalidIdentifier(PaperImportError):
    """Input is not an arXiv ID, arXiv:-prefixed ID, or arxiv.org URL"""


class LookupFailed(PaperImportError):
    """Paper metadata could not be retrieved"""


class AssetFetchFailed(PaperImportError):
    """PDF download failed"""


class WriteFailed(PaperImportError):
    """A folder or file in the vault could not be written"""


# Collaborator-level errors, translated by the importer


class NetworkError(Exception):
    """Remote service unreachable or returned an unusable response"""


class PaperNotFound(Exception):
    """arXiv has no paper with the requested ID"""
