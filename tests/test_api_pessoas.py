# tests/test_api_pessoas.py
from fastapi.testclient import TestClient

ENDERECO_PADRAO = {
    "logradouro": "Rua A",
    "cidade": "Manaus",
    "estado": "AM",
    "cep": "69000000",
}


def test_criar_pessoa_retorna_201_com_location(client: TestClient, admin_headers: dict) -> None:
    payload = {"nome": "Ana Silva", "ativo": True, "endereco": ENDERECO_PADRAO}
    response = client.post("/pessoas", json=payload, headers=admin_headers)
    assert response.status_code == 201
    data = response.json()
    assert data["codigo"] > 0
    assert response.headers["Location"].endswith(f"/pessoas/{data['codigo']}")


def test_location_ignora_query_string_da_requisicao(client: TestClient, admin_headers: dict) -> None:
    payload = {"nome": "Ana Silva", "ativo": True, "endereco": ENDERECO_PADRAO}
    response = client.post("/pessoas?origem=cadastro", json=payload, headers=admin_headers)
    assert response.status_code == 201
    location = response.headers["Location"]
    assert "?" not in location
    assert location.endswith(f"/pessoas/{response.json()['codigo']}")


def test_nome_e_gravado_como_enviado(client: TestClient, admin_headers: dict, criar_pessoa) -> None:
    criada = criar_pessoa(nome=" Ana Silva ")
    response = client.get(f"/pessoas/{criada['codigo']}", headers=admin_headers)
    assert response.json()["nome"] == " Ana Silva "


def test_criar_e_buscar_retorna_mesmos_campos(client: TestClient, admin_headers: dict, criar_pessoa) -> None:
    criada = criar_pessoa()
    response = client.get(f"/pessoas/{criada['codigo']}", headers=admin_headers)
    assert response.status_code == 200
    data = response.json()
    assert data == {
        "codigo": criada["codigo"],
        "nome": "Ana Silva",
        "ativo": True,
        "endereco": ENDERECO_PADRAO,
    }


def test_buscar_pessoa_inexistente_retorna_404_com_envelope(client: TestClient, user_headers: dict) -> None:
    response = client.get("/pessoas/999", headers=user_headers)
    assert response.status_code == 404
    data = response.json()
    assert data["status"] == 404
    assert data["error"] == "Pessoa não encontrada"
    assert "timestamp" in data


def test_criar_pessoa_nome_curto_retorna_400_com_campos(client: TestClient, admin_headers: dict) -> None:
    payload = {"nome": "Al", "ativo": True, "endereco": ENDERECO_PADRAO}
    response = client.post("/pessoas", json=payload, headers=admin_headers)
    assert response.status_code == 400
    campos = [c["campo"] for c in response.json()["campos"]]
    assert "nome" in campos


def test_criar_pessoa_sem_endereco_retorna_400(client: TestClient, admin_headers: dict) -> None:
    response = client.post("/pessoas", json={"nome": "Ana Silva", "ativo": True}, headers=admin_headers)
    assert response.status_code == 400
    campos = [c["campo"] for c in response.json()["campos"]]
    assert "endereco" in campos


def test_criar_pessoa_endereco_incompleto_retorna_400(client: TestClient, admin_headers: dict) -> None:
    endereco = {"logradouro": "Rua A", "cidade": "Manaus", "estado": "AM"}
    payload = {"nome": "Ana Silva", "ativo": True, "endereco": endereco}
    response = client.post("/pessoas", json=payload, headers=admin_headers)
    assert response.status_code == 400
    campos = [c["campo"] for c in response.json()["campos"]]
    assert "endereco.cep" in campos


def test_criar_pessoa_sem_ativo_retorna_400(client: TestClient, admin_headers: dict) -> None:
    payload = {"nome": "Ana Silva", "endereco": ENDERECO_PADRAO}
    response = client.post("/pessoas", json=payload, headers=admin_headers)
    assert response.status_code == 400


def test_listar_pessoas_paginado(client: TestClient, user_headers: dict, criar_pessoa) -> None:
    for nome in ("Ana Silva", "Bruno Costa", "Carla Dias"):
        criar_pessoa(nome=nome)
    response = client.get("/pessoas?page=0&size=2", headers=user_headers)
    assert response.status_code == 200
    data = response.json()
    assert len(data["content"]) == 2
    assert data["number"] == 0
    assert data["size"] == 2
    assert data["total_elements"] == 3
    assert data["total_pages"] == 2


def test_listar_pessoas_filtra_nome_sem_diferenciar_maiusculas(client: TestClient, user_headers: dict, criar_pessoa) -> None:
    criar_pessoa(nome="Ana Silva")
    criar_pessoa(nome="Bruno Silveira")
    criar_pessoa(nome="Carla Dias")
    response = client.get("/pessoas?nome=SILV", headers=user_headers)
    nomes = sorted(p["nome"] for p in response.json()["content"])
    assert nomes == ["Ana Silva", "Bruno Silveira"]


def test_listar_pessoas_nome_em_branco_retorna_todas(client: TestClient, user_headers: dict, criar_pessoa) -> None:
    criar_pessoa(nome="Ana Silva")
    criar_pessoa(nome="Carla Dias")
    response = client.get("/pessoas", params={"nome": "   "}, headers=user_headers)
    assert response.json()["total_elements"] == 2


def test_listar_pessoas_ordenado_por_nome_desc(client: TestClient, user_headers: dict, criar_pessoa) -> None:
    criar_pessoa(nome="Ana Silva")
    criar_pessoa(nome="Carla Dias")
    response = client.get("/pessoas?sort=nome,desc", headers=user_headers)
    assert [p["nome"] for p in response.json()["content"]] == ["Carla Dias", "Ana Silva"]


def test_listar_pessoas_ordenacao_invalida_retorna_400(client: TestClient, user_headers: dict) -> None:
    response = client.get("/pessoas?sort=senha", headers=user_headers)
    assert response.status_code == 400


def test_atualizar_sem_endereco_mantem_endereco(client: TestClient, admin_headers: dict, criar_pessoa) -> None:
    criada = criar_pessoa()
    response = client.put(
        f"/pessoas/{criada['codigo']}",
        json={"nome": "Ana Souza", "ativo": False},
        headers=admin_headers,
    )
    assert response.status_code == 200
    data = response.json()
    assert data["nome"] == "Ana Souza"
    assert data["ativo"] is False
    assert data["endereco"] == ENDERECO_PADRAO


def test_atualizar_com_endereco_substitui_endereco_inteiro(client: TestClient, admin_headers: dict, criar_pessoa) -> None:
    criada = criar_pessoa()
    novo = {"logradouro": "Av. Brasil", "cidade": "Belém", "estado": "PA", "cep": "66000000"}
    response = client.put(
        f"/pessoas/{criada['codigo']}",
        json={"nome": "Ana Silva", "ativo": True, "endereco": novo},
        headers=admin_headers,
    )
    assert response.status_code == 200
    lida = client.get(f"/pessoas/{criada['codigo']}", headers=admin_headers).json()
    assert lida["endereco"] == novo


def test_atualizar_pessoa_inexistente_retorna_404(client: TestClient, admin_headers: dict) -> None:
    response = client.put("/pessoas/999", json={"nome": "Ana Silva", "ativo": True}, headers=admin_headers)
    assert response.status_code == 404


def test_patch_ativo_duas_vezes_retorna_409_na_segunda(client: TestClient, admin_headers: dict, criar_pessoa) -> None:
    criada = criar_pessoa()
    url = f"/pessoas/{criada['codigo']}/ativo"

    primeira = client.patch(url, json=False, headers=admin_headers)
    assert primeira.status_code == 200
    assert primeira.json()["ativo"] is False

    segunda = client.patch(url, json=False, headers=admin_headers)
    assert segunda.status_code == 409
    assert "já está definido como false" in segunda.json()["error"]


def test_patch_ativo_pessoa_inexistente_retorna_404(client: TestClient, admin_headers: dict) -> None:
    response = client.patch("/pessoas/999/ativo", json=True, headers=admin_headers)
    assert response.status_code == 404


def test_patch_ativo_exige_admin(client: TestClient, user_headers: dict, criar_pessoa) -> None:
    criada = criar_pessoa()
    response = client.patch(f"/pessoas/{criada['codigo']}/ativo", json=False, headers=user_headers)
    assert response.status_code == 403


def test_remover_pessoa_sem_lancamentos_retorna_204(client: TestClient, admin_headers: dict, criar_pessoa) -> None:
    criada = criar_pessoa()
    response = client.delete(f"/pessoas/{criada['codigo']}", headers=admin_headers)
    assert response.status_code == 204
    assert client.get(f"/pessoas/{criada['codigo']}", headers=admin_headers).status_code == 404


def test_remover_pessoa_em_uso_retorna_409(client: TestClient, admin_headers: dict, criar_pessoa, criar_lancamento) -> None:
    pessoa = criar_pessoa()
    criar_lancamento(pessoa=pessoa)
    response = client.delete(f"/pessoas/{pessoa['codigo']}", headers=admin_headers)
    assert response.status_code == 409
    assert response.json()["error"] == "Pessoa em uso e não pode ser removida."
    # Continua cadastrada
    assert client.get(f"/pessoas/{pessoa['codigo']}", headers=admin_headers).status_code == 200


def test_remover_pessoa_inexistente_retorna_404(client: TestClient, admin_headers: dict) -> None:
    assert client.delete("/pessoas/999", headers=admin_headers).status_code == 404


def test_remover_pessoa_exige_admin(client: TestClient, user_headers: dict, criar_pessoa) -> None:
    criada = criar_pessoa()
    assert client.delete(f"/pessoas/{criada['codigo']}", headers=user_headers).status_code == 403


def test_pessoas_sem_token_retorna_401(client: TestClient) -> None:
    response = client.get("/pessoas")
    assert response.status_code == 401
    assert response.headers.get("WWW-Authenticate") == "Bearer"
