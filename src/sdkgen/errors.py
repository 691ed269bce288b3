""" Exceptions raised while generating SDK API sources.

    Item-level errors are raised by the codecs without any knowledge of
    where the offending declaration lives; the assembler locates them before
    they propagate any further.
"""


class GenerationError(Exception):
    """Base class for all generation errors."""


class ItemError(GenerationError):
    """ A single contract item could not be processed. The *contract*,
        *category* and *index* attributes are None until the error has been
        located by the assembler.
    """

    def __init__(self, message):
        GenerationError.__init__(self, message)
        self.message = message
        self.contract = None
        self.category = None
        self.index = None


    def __str__(self):
        if self.contract is None:
            return self.message

        category = getattr(self.category, 'value', self.category)
        where = '%s/%s[%d]' % (self.contract, category, self.index)
        return where + ': ' + self.message


    def locate(self, contract, category, index):
        """ Record which declaration caused this error. Returns the error
            itself so that it can be re-raised inline.
        """

        self.contract = contract
        self.category = category
        self.index = index
        return self


class DescriptorDecodeError(ItemError):
    """An encoded method descriptor could not be decoded."""


class SchemaParseError(ItemError):
    """A payload type schema could not be parsed."""


class DuplicateFileError(ItemError):
    """An item would generate a file already generated earlier in the run."""


class TemplateLoadError(GenerationError):
    """A template is missing, unreadable, or could not be filled in."""


class UnregisteredCategoryError(GenerationError):
    """No signature generator is registered for a contract item category."""


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
