import pytest

@pytest.fixture
def flat_records():
    return [
        {"id" : 1, "pid" : None, "text" : "A"},
        {"id" : 2, "pid" : 1, "text" : "B"},
        {"id" : 3, "pid" : 1, "text" : "C"},
        {"id" : 4, "pid" : 2, "text" : "D"},
        ]

@pytest.fixture
def nested_records():
    return [
        {"id" : 1, "text" : "A", "child" : [
            {"id" : 2, "text" : "B", "child" : [
                {"id" : 4, "text" : "D"}
                ]},
            {"id" : 3, "text" : "C"}
            ]}
        ]

@pytest.fixture
def country_records():
    # Two provinces, the first with two cities (one with districts)
    return [
        {"id" : "cn", "pid" : None, "text" : "China"},
        {"id" : "bj", "pid" : "cn", "text" : "Beijing"},
        {"id" : "gd", "pid" : "cn", "text" : "Guangdong"},
        {"id" : "gz", "pid" : "gd", "text" : "Guangzhou"},
        {"id" : "sz", "pid" : "gd", "text" : "Shenzhen"},
        {"id" : "ft", "pid" : "sz", "text" : "Futian"},
        {"id" : "ns", "pid" : "sz", "text" : "Nanshan"},
        {"id" : "jp", "pid" : None, "text" : "Japan"},
        ]
