import pytest
import sdkgen


def record(name, namespace='pkg'):
    schema = dict()
    schema['type'] = 'record'
    schema['name'] = name
    schema['namespace'] = namespace
    schema['fields'] = [{'name': 'value', 'type': 'string'}]

    return sdkgen.json.dumps(schema).decode()


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """ Keep the environment of the test runner from leaking into the
        configuration, and start every test with an empty template cache.
    """

    for variable in ('SDKGEN_TEMPLATES', 'SDKGEN_EXTENSION', 'SDKGEN_POLICY', 'SDKGEN_WORKERS'):
        monkeypatch.delenv(variable, raising=False)

    sdkgen.template.clear()
    yield
    sdkgen.template.clear()


@pytest.fixture
def schemas():
    schemas = dict()
    schemas['ClassA'] = record('ClassA')
    schemas['ClassB'] = record('ClassB')
    schemas['ClassC'] = record('ClassC')
    return schemas


@pytest.fixture
def messaging(schemas):
    """ The messaging contract used throughout the tests: four calls and
        three listener registrations.
    """

    factory = sdkgen.contract.factory
    contract = factory.messaging_contract()

    send = factory.send_msg_def()
    receive = factory.receive_msg_def()

    a = schemas['ClassA']
    b = schemas['ClassB']
    c = schemas['ClassC']

    contract.add(send, factory.item_info('sendA', in_schema=a))
    contract.add(send, factory.item_info('getA', out_schema=a))
    contract.add(send, factory.item_info('getB', in_schema=a, out_schema=b))
    contract.add(send, factory.item_info('getC', in_schema=a, out_schema=c))

    contract.add(receive, factory.item_info('setMethodAListener', in_schema=c, out_schema=a))
    contract.add(receive, factory.item_info('setMethodBListener', in_schema=c, out_schema=b))
    contract.add(receive, factory.item_info('setMethodCListener', out_schema=c))

    return contract


@pytest.fixture
def generation_request(messaging):
    return sdkgen.contract.factory.request(messaging, 'org.example.Family', 1)


@pytest.fixture
def template_dir(tmp_path):
    """ A template directory with minimal templates, for tests that need to
        see exactly what was rendered.
    """

    api = '${namespace}|${type_name}|${method_signatures}'
    listener = '${namespace}|${type_name}|${param_type}|${return_type}'

    (tmp_path / 'api.template').write_text(api)
    (tmp_path / 'listener.template').write_text(listener)

    return str(tmp_path)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
