""" The source assembler drives a complete generation run: it resolves the
    namespace, walks the contract catalog, hands each item to the generator
    registered for its category, and renders the generated API type.

    Items are always processed in catalog order: contracts in the order the
    request lists them, then item definitions in definition order, then the
    items of each definition in the order they were declared. Output is
    reproducible byte-for-byte for identical input.
"""

from __future__ import annotations

import concurrent.futures
import enum
import logging
from typing import Callable, List, Optional

from .. import config
from .. import template
from ..codec import descriptor
from ..codec import schema
from ..config import Policy
from ..contract.model import GeneratedFile, GenerationRequest, ResolvedMethod
from ..errors import DuplicateFileError, ItemError
from . import namespace
from . import registry
from .registry import Registry


logger = logging.getLogger(__name__)

STATEMENT_END = ';\n'


class Phase(enum.Enum):
    CREATED = 'created'
    NAMESPACE_RESOLVED = 'namespace-resolved'
    ITEMS_PROCESSED = 'items-processed'
    ASSEMBLED = 'assembled'


class Assembler:
    """ One generation run for one :class:`GenerationRequest`. An instance
        can only be :func:`run` once; create a new one for every run.

        Any argument left as None falls back to :mod:`sdkgen.config`. The
        *registry* argument, if provided, is called with the resolved
        namespace and must return a new :class:`Registry`.

        :ivar failures: Item errors skipped under the best-effort policy.
        :ivar namespace: The namespace shared by every generated file.
        :ivar phase: How far the run has progressed.
    """

    def __init__(self, request: GenerationRequest, policy=None, extension=None,
                 directory=None, workers=None, label=None,
                 registry: Optional[Callable[[str], Registry]] = None):

        self.request = request
        self.policy = config.policy(policy)
        self.extension = config.extension(extension)
        self.directory = config.templates(directory)
        self.workers = config.workers(workers)
        self.label = label
        self.registry = registry

        self.namespace: Optional[str] = None
        self.phase = Phase.CREATED
        self.failures: List[ItemError] = list()


    def run(self) -> List[GeneratedFile]:
        """ Generate every source file for the request. The generated API
            file comes first, followed by listener files in the order their
            items were processed.
        """

        if self.phase is not Phase.CREATED:
            raise RuntimeError('an Assembler can only run once')

        request = self.request

        self.namespace = namespace.resolve(request.family, request.extension_id)
        self.phase = Phase.NAMESPACE_RESOLVED
        logger.debug('generating into namespace %s', self.namespace)

        if self.registry is None:
            generators = registry.default(self.namespace, self.extension, self.directory)
        else:
            generators = self.registry(self.namespace)

        signatures = list()
        side_files = list()
        produced = set()

        items = list(self._items())

        if self.workers > 0 and len(items) > 1:
            # Executor.map() yields in submission order, which keeps the
            # output in catalog order no matter how the workers finish.
            with concurrent.futures.ThreadPoolExecutor(max_workers=self.workers) as workers:
                results = list(workers.map(self._resolve, items))
        else:
            results = map(self._resolve, items)

        for item, result in zip(items, results):
            contract, definition, index, info = item

            if isinstance(result, ItemError):
                self._skip(result)
                continue

            generator = generators.lookup(definition.category)
            signature = generator.generate(result.name, result.input_type, result.output_type)

            # Two items generating the same file would have the later one
            # silently replace the earlier when the files are written out.
            names = [side_file.file_name for side_file in signature.side_files]
            repeated = [name for name in names if name in produced]

            if repeated or len(set(names)) != len(names):
                error = DuplicateFileError('file %s is generated more than once' % (', '.join(repeated or names)))
                self._skip(error.locate(contract.name, definition.category, index))
                continue

            produced.update(names)
            signatures.append(signature.text + STATEMENT_END)
            side_files.extend(signature.side_files)

        self.phase = Phase.ITEMS_PROCESSED

        type_name = namespace.api_type_name(self.label)
        api = template.load(template.API, self.directory)
        content = api.render(namespace=self.namespace,
                             type_name=type_name,
                             method_signatures=''.join(signatures))

        primary = GeneratedFile(type_name + '.' + self.extension, content)

        files = [primary]
        files.extend(side_files)

        self.phase = Phase.ASSEMBLED
        logger.debug('generated %d signatures, %d files, %d items skipped',
                     len(signatures), len(files), len(self.failures))

        return files


    def _skip(self, error):
        """ Apply the error policy to a located item error: raise it, or
            record it and let the run carry on without the item.
        """

        if self.policy is Policy.FAIL_FAST:
            raise error

        logger.warning('skipping contract item: %s', error)
        self.failures.append(error)


    def _items(self):

        for contract in self.request.contracts:
            for definition in contract.definitions:
                for index, info in enumerate(contract.items(definition)):
                    yield contract, definition, index, info


    def _resolve(self, item):
        """ Decode one item. Errors are returned rather than raised, located
            at the offending declaration, so that the caller applies the
            error policy in catalog order.
        """

        contract, definition, index, info = item

        try:
            method = descriptor.decode(info.data)
            input_type = schema.resolve(info.in_schema)
            output_type = schema.resolve(info.out_schema)
        except ItemError as error:
            return error.locate(contract.name, definition.category, index)

        return ResolvedMethod(method.name, input_type, output_type)


# end of class Assembler



def generate(request: GenerationRequest, **kwargs) -> List[GeneratedFile]:
    """ Run a new :class:`Assembler` for *request* and return the generated
        files. Keyword arguments are passed to the :class:`Assembler`.
    """

    assembler = Assembler(request, **kwargs)
    return assembler.run()


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
