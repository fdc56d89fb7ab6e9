import pytest
from conftest import RecordingDispatcher
from resource_client.core.collection import CollectionResource
from resource_client.core.errors import ResourceHTTPError
from resource_client.core.request import AddressableResource, TransportResponse


@pytest.mark.asyncio
async def test_get_builds_type_address_and_accept(dispatcher):
    collection = CollectionResource("music:Track", dispatcher)

    await collection.get()

    req = dispatcher.last
    assert req.method == "GET"
    assert req.url == "/music:Track"
    assert req.accept == "application/json"
    assert req.content_type is None
    assert req.options == {}


@pytest.mark.asyncio
async def test_get_returns_transport_result_unmodified():
    response = TransportResponse(status_code=200, data=[{"id": "1"}, {"id": "2"}])
    collection = CollectionResource("music:Track", RecordingDispatcher(response))

    result = await collection.get()

    assert result is response


@pytest.mark.asyncio
async def test_get_forwards_options_verbatim(dispatcher):
    collection = CollectionResource("music:Track", dispatcher)
    query = [{"$like": {"title": "blue"}}]

    await collection.get(
        {"dataType": "application/xml", "query": query, "pageSize": 5}
    )

    req = dispatcher.last
    assert req.accept == "application/xml"
    assert req.options == {"query": query, "pageSize": 5}


@pytest.mark.asyncio
async def test_resource_params_are_base_options(dispatcher):
    collection = CollectionResource(
        "music:Track", dispatcher, params={"pageSize": 20, "sort": "title"}
    )

    await collection.get({"pageSize": 5})

    assert dispatcher.last.options == {"pageSize": 5, "sort": "title"}


@pytest.mark.asyncio
async def test_add_puts_data_and_returns_location_id():
    response = TransportResponse(
        status_code=201,
        headers={"location": "https://api.test/resource/music:Track/555"},
    )
    dispatcher = RecordingDispatcher(response)
    collection = CollectionResource("music:Track", dispatcher)

    new_id = await collection.add({"title": "Blue"})

    assert new_id == "555"
    req = dispatcher.last
    assert req.method == "PUT"
    assert req.url == "/music:Track"
    assert req.content_type == "application/json"
    assert req.accept == "application/json"
    assert req.data == {"title": "Blue"}


@pytest.mark.asyncio
async def test_add_propagates_transport_error_unchanged():
    error = ResourceHTTPError(
        status_code=409, method="PUT", url="/music:Track", message="conflict"
    )
    collection = CollectionResource("music:Track", RecordingDispatcher(error=error))

    with pytest.raises(ResourceHTTPError) as exc:
        await collection.add({"title": "Blue"})

    assert exc.value is error


def test_collection_is_addressable(dispatcher):
    collection = CollectionResource("music:Track", dispatcher)
    assert isinstance(collection, AddressableResource)
    assert collection.address("1") == "/music:Track/1"


@pytest.mark.asyncio
async def test_add_reads_mixed_case_location_header():
    response = TransportResponse(
        status_code=201, headers={"Location": "/resource/music:Track/555"}
    )
    collection = CollectionResource("music:Track", RecordingDispatcher(response))

    assert await collection.add({"title": "Blue"}) == "555"


@pytest.mark.asyncio
async def test_add_without_location_returns_none(dispatcher):
    collection = CollectionResource("music:Track", dispatcher)

    assert await collection.add({"title": "Blue"}) is None
    assert dispatcher.last.method == "PUT"
