import pytest

from cloudsigma_client import CloudSigmaClient, ListOptions
from cloudsigma_client.auth import TokenCredentialsProvider
from cloudsigma_client.exceptions import EmptyArgumentError, EmptyPayloadError
from cloudsigma_client.resources import Drive, Server, ServerDrive

BASE_URL = "https://zrh.cloudsigma.com/api/2.0"
SERVER_UUID = "long-uuid"


def build_client():
    return CloudSigmaClient(TokenCredentialsProvider("token"))


def test_list_servers(requests_mock):
    client = build_client()
    requests_mock.get(
        f"{BASE_URL}/servers/detail/",
        json={
            "meta": {"limit": 0, "offset": 0, "total_count": 1},
            "objects": [
                {
                    "uuid": SERVER_UUID,
                    "name": "web",
                    "cpu": 2000,
                    "mem": 536870912,
                    "status": "running",
                    "runtime": {"nics": [{"interface_type": "public", "mac": "22:aa:bb:cc:dd:ee"}]},
                }
            ],
        },
    )

    response = client.servers.list(options=ListOptions())

    server = response.data[0]
    assert server.name == "web"
    assert server.runtime.nics[0].interface_type == "public"
    assert response.meta.total_count == 1
    assert requests_mock.last_request.headers["Authorization"] == "Bearer token"
    assert requests_mock.last_request.qs == {"limit": ["0"]}


def test_get_server(requests_mock):
    client = build_client()
    requests_mock.get(
        f"{BASE_URL}/servers/{SERVER_UUID}/",
        json={
            "uuid": SERVER_UUID,
            "name": "web",
            "drives": [{"boot_order": 1, "dev_channel": "0:0", "device": "virtio", "drive": {"uuid": "d-1"}}],
        },
    )

    response = client.servers.get(SERVER_UUID)

    assert response.data.drives[0].drive.uuid == "d-1"


def test_create_server(requests_mock):
    client = build_client()
    requests_mock.post(
        f"{BASE_URL}/servers/",
        status_code=201,
        json={"objects": [{"uuid": SERVER_UUID, "name": "web", "status": "stopped"}]},
    )

    server = Server(
        name="web",
        cpu=2000,
        mem=536870912,
        vnc_password="secret",
        drives=[ServerDrive(boot_order=1, dev_channel="0:0", device="virtio", drive=Drive(uuid="d-1"))],
    )
    response = client.servers.create([server])

    assert requests_mock.last_request.json() == {
        "objects": [
            {
                "cpu": 2000,
                "drives": [
                    {"boot_order": 1, "dev_channel": "0:0", "device": "virtio", "drive": {"uuid": "d-1"}}
                ],
                "mem": 536870912,
                "name": "web",
                "vnc_password": "secret",
            }
        ]
    }
    assert response.data[0].status == "stopped"


def test_update_server_omits_uuid(requests_mock):
    client = build_client()
    requests_mock.put(
        f"{BASE_URL}/servers/{SERVER_UUID}/",
        json={"uuid": SERVER_UUID, "name": "renamed"},
    )

    response = client.servers.update(SERVER_UUID, Server(uuid=SERVER_UUID, name="renamed"))

    assert requests_mock.last_request.json() == {"name": "renamed"}
    assert response.data.uuid == SERVER_UUID


def test_update_server_without_payload(requests_mock):
    client = build_client()

    with pytest.raises(EmptyPayloadError):
        client.servers.update(SERVER_UUID, None)

    assert requests_mock.call_count == 0


def test_delete_server(requests_mock):
    client = build_client()
    requests_mock.delete(f"{BASE_URL}/servers/{SERVER_UUID}/", status_code=204)

    response = client.servers.delete(SERVER_UUID)

    assert response.status_code == 204


@pytest.mark.parametrize("action", ["start", "stop", "shutdown"])
def test_server_actions(requests_mock, action):
    client = build_client()
    requests_mock.post(
        f"{BASE_URL}/servers/{SERVER_UUID}/action/?do={action}",
        status_code=202,
        json={"action": action, "result": "success", "uuid": SERVER_UUID},
    )

    response = getattr(client.servers, action)(SERVER_UUID)

    assert requests_mock.last_request.qs == {"do": [action]}
    assert requests_mock.last_request.body is None
    assert response.data.action == action
    assert response.data.result == "success"


@pytest.mark.parametrize("action", ["start", "stop", "shutdown"])
def test_server_actions_require_uuid(requests_mock, action):
    client = build_client()

    with pytest.raises(EmptyArgumentError):
        getattr(client.servers, action)("")

    assert requests_mock.call_count == 0
