from app import create_app

app = create_app()

# ================= RUN =================
if __name__ == "__main__":
    app.run(host="0.0.0.0", port=app.config["PORT"])
