from voicetidy.main import run

run()
