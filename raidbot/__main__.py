from raidbot.clients.disc import run

if __name__ == "__main__":
    run()
