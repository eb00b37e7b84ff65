import io

import cv2
import numpy as np
import pytest

from sobel_paralelo.servidor import app


@pytest.fixture
def cliente():
    app.config["TESTING"] = True
    with app.test_client() as cliente:
        yield cliente


def png(imagen):
    ok, buffer = cv2.imencode(".png", imagen)
    return buffer.tobytes()


def test_formulario(cliente):
    respuesta = cliente.get("/")
    assert respuesta.status_code == 200
    assert b"nro_workers" in respuesta.data


def test_salud(cliente):
    assert cliente.get("/salud").get_json() == {"estado": "ok"}


def test_procesa_imagen(cliente):
    imagen = np.zeros((20, 30), dtype=np.uint8)
    imagen[5:15, 10:20] = 255
    respuesta = cliente.post(
        "/",
        data={"imagen": (io.BytesIO(png(imagen)), "cuadrado.png"), "nro_workers": "3"},
        content_type="multipart/form-data",
    )
    assert respuesta.status_code == 200
    assert respuesta.mimetype == "image/jpeg"
    assert "resultado.jpg" in respuesta.headers["Content-Disposition"]

    resultado = cv2.imdecode(np.frombuffer(respuesta.data, np.uint8), cv2.IMREAD_GRAYSCALE)
    assert resultado.shape == (20, 30)


def test_faltan_parametros(cliente):
    respuesta = cliente.post("/", data={"nro_workers": "2"}, content_type="multipart/form-data")
    assert respuesta.status_code == 400


@pytest.mark.parametrize("nro_workers", ["cero", "0", "-2"])
def test_workers_invalidos(cliente, nro_workers):
    respuesta = cliente.post(
        "/",
        data={"imagen": (io.BytesIO(png(np.zeros((4, 4), dtype=np.uint8))), "a.png"), "nro_workers": nro_workers},
        content_type="multipart/form-data",
    )
    assert respuesta.status_code == 400


def test_imagen_invalida(cliente):
    respuesta = cliente.post(
        "/",
        data={"imagen": (io.BytesIO(b"basura"), "a.png"), "nro_workers": "2"},
        content_type="multipart/form-data",
    )
    assert respuesta.status_code == 400


def test_workers_limitados_por_el_host(cliente, monkeypatch):
    from sobel_paralelo import servidor

    monkeypatch.setenv("SOBEL_WORKERS", "2")
    pedidos = []

    def procesar(imagen, n):
        pedidos.append(n)
        return imagen

    monkeypatch.setattr(servidor, "procesar_imagen", procesar)
    respuesta = cliente.post(
        "/",
        data={"imagen": (io.BytesIO(png(np.zeros((50, 4), dtype=np.uint8))), "a.png"), "nro_workers": "5000"},
        content_type="multipart/form-data",
    )
    assert respuesta.status_code == 200
    assert pedidos == [2]
