from pronlex.client import PronlexClient


if __name__ == "__main__":
    client = PronlexClient(base_url="http://localhost:8200")
    print("Client ready. Example lookup:")
    word = client.word("one")
    if word is None:
        print("'one' is not in the dictionary")
    else:
        for pron in word["pronunciations"]:
            print(word["spelling"], " ".join(pron["units"]))
