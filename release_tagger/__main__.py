from release_tagger.action import main

if __name__ == "__main__":
    main()
