import pytest
from resource_client.core.collection import CollectionResource
from resource_client.core.errors import ResourceValidationError
from resource_client.core.relation import RelationResource
from resource_client.core.resources import Resources


def test_factory_builds_resources_sharing_dispatcher(dispatcher):
    resources = Resources(dispatcher)

    collection = resources.collection("music:Track", params={"pageSize": 10})
    relation = resources.relation("music:Album", "12", "music:Track")

    assert isinstance(collection, CollectionResource)
    assert isinstance(relation, RelationResource)
    assert collection.requests.dispatcher is dispatcher
    assert relation.requests.dispatcher is dispatcher
    assert collection.requests.params == {"pageSize": 10}


def test_factory_relation_validates(dispatcher):
    with pytest.raises(ResourceValidationError):
        Resources(dispatcher).relation("music:Album", None, "music:Track")
