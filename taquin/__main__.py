from taquin.main import app

app()
