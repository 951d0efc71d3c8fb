from folder_cabinet.cli import app

app(prog_name="folder-cabinet")
