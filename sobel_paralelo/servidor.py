import io
import logging

from flask import Flask, jsonify, render_template_string, request, send_file

from . import config
from .detector import procesar_imagen
from .errores import ErrorDecodificacion
from .imagen import codificar_bytes, decodificar

app = Flask(__name__)

HTML_FORM = """
<!doctype html>
<html>
  <head><title>Filtro Sobel</title></head>
  <body>
    <h1>Subir imagen para aplicar filtro</h1>
    <form method="POST" enctype="multipart/form-data">
      Imagen: <input type="file" name="imagen" accept="image/*" required><br>
      Nro de Workers: <input type="number" name="nro_workers" min="1" required><br>
      <input type="submit" value="Procesar Imagen">
    </form>
  </body>
</html>
"""


@app.route("/salud", methods=["GET"])
def salud():
    return jsonify({"estado": "ok"}), 200


@app.route("/", methods=["GET", "POST"])
def index():
    if request.method == "GET":
        return render_template_string(HTML_FORM)

    # POST: procesar imagen
    if "imagen" not in request.files or "nro_workers" not in request.form:
        return "Faltan parámetros.", 400

    file = request.files["imagen"]
    if file.filename == "":
        return "No se seleccionó archivo.", 400

    try:
        n = int(request.form["nro_workers"])
    except ValueError:
        return "Nro de workers inválido.", 400
    if n < 1:
        return "Nro de workers inválido.", 400
    # No más hilos por pedido que los configurados para el host
    n = min(n, config.nro_workers())

    try:
        img = decodificar(file.read())
        resultado = procesar_imagen(img, n)
        datos = codificar_bytes(resultado, ".jpg")
    except ErrorDecodificacion as e:
        logging.warning("[⚠️] Imagen inválida: %s", e)
        return "No se pudo leer la imagen.", 400
    except Exception as e:
        logging.exception("[❌] Error procesando imagen")
        return f"Error interno: {str(e)}", 500

    logging.info("[📤] Imagen procesada con %d workers (%s)", n, file.filename)
    return send_file(io.BytesIO(datos), as_attachment=True, download_name="resultado.jpg", mimetype="image/jpeg")


def main():
    logging.basicConfig(level=config.nivel_log())
    logging.getLogger("werkzeug").setLevel(logging.WARNING)   # Solo warnings o errores del servidor Flask
    app.run(host=config.host(), port=config.puerto())


if __name__ == "__main__":
    main()
